"""초기 데이터 시드 스크립트 — 조직, 사용자, 샘플 조합원 생성.

Seed script — Creates an initial organization, a user and sample members.
Run this script once to bootstrap a development database.

Usage:
    python -m coop_members.seed

Creates:
    - 1개 조직: "Cooperativa Central" (1 organization)
    - 1개 사용자: admin@coop.local (1 user)
    - 3명 조합원 — 일괄 등록 경로 사용 (3 members, inserted through the bulk path)
"""

import asyncio

from sqlalchemy import select

from coop_members.database import async_session, engine, Base
from coop_members.models import Organization, User
from coop_members.schemas.cooperated import CooperatedCreate
from coop_members.services.cooperated_service import cooperated_service

_SAMPLE_MEMBERS: list[tuple[str, str, str, str]] = [
    ("Ana", "Souza", "ana@coop.local", "123.456.789-09"),
    ("Bruno", "Lima", "bruno@coop.local", "987.654.321-00"),
    ("Carla", "Dias", "carla@coop.local", "111.444.777-35"),
]


async def seed() -> None:
    """데이터베이스를 초기 데이터로 시드합니다.

    Seed the database with initial data.
    Idempotent: 이미 시드된 경우 건너뜁니다 (Skips if already seeded).
    """
    # 테이블 생성 — DDL 실행 (Create all tables from ORM metadata)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as db:
        result = await db.execute(select(Organization).limit(1))
        if result.scalar_one_or_none():
            print("Already seeded. Skipping.")
            return

        org: Organization = Organization(name="Cooperativa Central")
        db.add(org)
        db.add(User(email="admin@coop.local", first_name="System", last_name="Admin"))
        await db.commit()

        # create_bulk가 자체적으로 커밋 (create_bulk commits on its own)
        inserted: int = await cooperated_service.create_bulk(
            db,
            [
                CooperatedCreate(
                    first_name=first,
                    last_name=last,
                    email=email,
                    document=document,
                    organization=str(org.id),
                )
                for first, last, email, document in _SAMPLE_MEMBERS
            ],
        )
        print(f"Seeded: org={org.id}, members={inserted}")


if __name__ == "__main__":
    asyncio.run(seed())
