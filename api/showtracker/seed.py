"""
Load demo users and shows into the configured database.

    python -m showtracker.seed [--reset]

--reset drops every table before recreating and seeding it.
"""
import sys
import logging
from sqlmodel import Session, select
from .database import engine, init_db, recreate_tables
from .models import User, Show, Genre

logger = logging.getLogger(__name__)

DEMO_USERS = [
    {
        "username": "tomscott",
        "password": "password",
        "shows": [
            {"title": "two and a half men", "genre": Genre.COMEDY, "rating": 7, "status": "watching"},
            {"title": "doctor who", "genre": Genre.DRAMA, "rating": 9, "status": "finished"},
        ],
    },
    {
        "username": "ada",
        "password": "lovelace1815",
        "shows": [
            {"title": "the haunting of hill house", "genre": Genre.HORROR, "rating": 8, "status": "watching"},
            {"title": "friends", "genre": Genre.SITCOM, "rating": 8.5, "status": "rewatching"},
        ],
    },
]


def seed_demo_data(db: Session) -> int:
    """Insert the demo users and their shows, skipping usernames already present.

    Returns the number of users created.
    """
    created = 0
    for user_data in DEMO_USERS:
        existing_user = db.exec(
            select(User).where(User.username == user_data["username"])
        ).first()
        if existing_user:
            logger.info(f"Skipping existing user {user_data['username']}")
            continue

        user = User(username=user_data["username"], password=user_data["password"])
        user.shows = [Show(**show_data) for show_data in user_data["shows"]]
        db.add(user)
        created += 1

    db.commit()
    logger.info(f"Seeded {created} demo users")
    return created


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    if "--reset" in argv:
        recreate_tables()
    else:
        init_db()

    with Session(engine) as session:
        seed_demo_data(session)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main()
