#!/usr/bin/env python3
"""Seed demo data for local development.

Creates a dedicated demo user with a handful of posts in the configured database.

Usage:
    DATABASE_URL=sqlite:///./bloglist.db JWT_SECRET=dev-secret \
        python scripts/seed_demo_data.py
"""

import os
import sys

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.config import get_settings
from src.database import Database
from src.models import Post, User
from src.services.auth import get_password_hash

# Demo user credentials
DEMO_USERNAME = "demo"
DEMO_PASSWORD = "demopass123"

DEMO_POSTS = [
    ("React patterns", "Michael Chan", "https://reactpatterns.com/", 7),
    (
        "Go To Statement Considered Harmful",
        "Edsger W. Dijkstra",
        "https://homepages.cwi.nl/~storm/teaching/reader/Dijkstra68.pdf",
        5,
    ),
    (
        "Canonical string reduction",
        "Edsger W. Dijkstra",
        "https://www.cs.utexas.edu/~EWD/transcriptions/EWD08xx/EWD808.html",
        12,
    ),
    ("First class tests", "Robert C. Martin", "http://blog.cleancoder.com/uncle-bob/2017/05/05/TestDefinitions.html", 10),
    ("TDD harms architecture", "Robert C. Martin", "http://blog.cleancoder.com/uncle-bob/2017/03/03/TDD-Harms-Architecture.html", 0),
    ("Type wars", "Robert C. Martin", "http://blog.cleancoder.com/uncle-bob/2016/05/01/TypeWars.html", 2),
]


def seed_demo_data():
    """Seed the database with a demo user and posts."""
    database = Database(get_settings().database_url)
    database.init()
    session = database.session()

    try:
        # Check if demo user already exists
        existing_user = session.query(User).filter_by(username=DEMO_USERNAME).first()
        if existing_user:
            print("Demo data already exists. Clearing and re-seeding...")
            session.query(Post).filter_by(user_id=existing_user.id).delete()
            session.delete(existing_user)
            session.commit()

        print("Creating demo user...")
        user = User(
            username=DEMO_USERNAME,
            password_hash=get_password_hash(DEMO_PASSWORD),
            name="Demo User",
        )
        session.add(user)
        session.flush()

        print("Creating posts...")
        for title, author, url, likes in DEMO_POSTS:
            user.posts.append(Post(title=title, author=author, url=url, likes=likes))

        session.commit()
        print("Demo data seeded successfully!")

    except Exception as e:
        session.rollback()
        print(f"Error seeding demo data: {e}")
        raise
    finally:
        session.close()
        database.dispose()


if __name__ == "__main__":
    seed_demo_data()
