"""Database seeder for local development of the Hacker News GraphQL API."""
import asyncio
import argparse
import random
import time

from app.database import engine, async_session, Base
from app.models import Link, Comment

TOPICS = ["python", "graphql", "postgresql", "sqlalchemy", "fastapi", "asyncio",
          "docker", "kubernetes", "rust", "compilers", "databases", "security"]

HOSTS = ["news.example.com", "blog.example.org", "docs.example.net", "example.io:8080"]


async def seed(small: bool = False):
    num_links = 20 if small else 500
    max_comments_per_link = 3 if small else 10

    print(f"Seeding: {num_links} links, up to {max_comments_per_link} comments each")
    start = time.perf_counter()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as session:
        links = []
        for i in range(num_links):
            topic = random.choice(TOPICS)
            link = Link(
                url=f"https://{random.choice(HOSTS)}/{topic}/{i}",
                description=f"Story {i}: what's new in {topic}",
            )
            session.add(link)
            links.append(link)
        await session.flush()
        print(f"  Created {len(links)} links")

        total_comments = 0
        for link in links:
            for n in range(random.randint(0, max_comments_per_link)):
                session.add(Comment(body=f"Comment {n} on story {link.id}", link_id=link.id))
                total_comments += 1
        await session.flush()
        print(f"  Created {total_comments} comments")

        await session.commit()

    await engine.dispose()

    elapsed = time.perf_counter() - start
    print(f"\nSeeding complete in {elapsed:.1f}s")


def main():
    parser = argparse.ArgumentParser(description="Seed the Hacker News database")
    parser.add_argument("--small", action="store_true", help="Use small dataset (20 links)")
    args = parser.parse_args()
    asyncio.run(seed(small=args.small))


if __name__ == "__main__":
    main()
