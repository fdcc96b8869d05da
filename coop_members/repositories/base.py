"""기본 CRUD 레포지토리 — 모든 레포지토리의 부모 클래스.

Base CRUD Repository — Parent class for all domain repositories.
Provides generic Create, Read, Update and soft-delete operations.

Models with a ``deleted_at`` column are soft-deletable: reads skip rows whose
``deleted_at`` is set unless ``include_deleted=True`` is passed.

Usage:
    class OrganizationRepository(BaseRepository[Organization]):
        def __init__(self) -> None:
            super().__init__(Organization)
"""

from datetime import datetime, timezone
from typing import Any, Generic, TypeVar
from uuid import UUID

from sqlalchemy import Select, Uuid, inspect, select
from sqlalchemy.ext.asyncio import AsyncSession

from coop_members.database import Base

# 제네릭 타입 변수 — SQLAlchemy 모델을 나타냄
# Generic type variable representing a SQLAlchemy model
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """제네릭 CRUD 레포지토리.

    Generic CRUD repository providing common database operations.

    Attributes:
        model: SQLAlchemy 모델 클래스 (The SQLAlchemy model class)
    """

    def __init__(self, model: type[ModelType]) -> None:
        self.model: type[ModelType] = model

    @property
    def soft_deletable(self) -> bool:
        """모델이 deleted_at 컬럼을 갖는지 여부 (Whether the model has deleted_at)."""
        return "deleted_at" in inspect(self.model).columns

    def base_query(self, include_deleted: bool = False) -> Select:
        """기본 SELECT 쿼리 — 소프트 삭제된 행 제외.

        Base SELECT for the model, excluding soft-deleted rows unless asked.
        """
        query: Select = select(self.model)
        if self.soft_deletable and not include_deleted:
            query = query.where(self.model.deleted_at.is_(None))
        return query

    def column_filters(self, filters: dict[str, Any] | None) -> dict[str, Any] | None:
        """필터에서 실제 컬럼만 남기고 UUID 컬럼 값을 변환합니다.

        Keep only keys that name a mapped column; relationships and other
        class attributes are ignored. String values for ``Uuid`` columns are
        parsed, and ``None`` is returned when one is malformed, meaning the
        filter can match nothing.
        """
        columns = inspect(self.model).columns
        result: dict[str, Any] = {}
        for column_name, value in (filters or {}).items():
            if column_name not in columns:
                continue
            if isinstance(columns[column_name].type, Uuid) and value is not None and not isinstance(value, UUID):
                try:
                    value = UUID(str(value))
                except ValueError:
                    return None
            result[column_name] = value
        return result

    def apply_filters(self, query: Select, filters: dict[str, Any]) -> Select:
        """컬럼 동등 조건 적용 (Apply column-equality filters)."""
        for column_name, value in filters.items():
            query = query.where(getattr(self.model, column_name) == value)
        return query

    async def get_by_id(
        self,
        db: AsyncSession,
        record_id: UUID,
        include_deleted: bool = False,
    ) -> ModelType | None:
        """ID로 단일 레코드를 조회합니다.

        Retrieve a single record by its UUID.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            record_id: 조회할 레코드의 UUID (UUID of the record to retrieve)
            include_deleted: 소프트 삭제 행 포함 여부 (Include soft-deleted rows)

        Returns:
            ModelType | None: 조회된 레코드 또는 None (Found record or None)
        """
        query: Select = self.base_query(include_deleted).where(self.model.id == record_id)
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def get_one(
        self,
        db: AsyncSession,
        filters: dict[str, Any],
        include_deleted: bool = False,
    ) -> ModelType | None:
        """조건에 맞는 첫 번째 레코드를 조회합니다.

        Retrieve the first record matching every given column equality.
        Unknown keys are ignored; a malformed UUID value matches nothing.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            filters: 검색 조건 딕셔너리 {'컬럼명': 값} (Filter dict)
            include_deleted: 소프트 삭제 행 포함 여부 (Include soft-deleted rows)

        Returns:
            ModelType | None: 조회된 레코드 또는 None (Found record or None)
        """
        columns: dict[str, Any] | None = self.column_filters(filters)
        if columns is None:
            return None

        query: Select = self.apply_filters(self.base_query(include_deleted), columns)
        result = await db.execute(query.limit(1))
        return result.scalars().first()

    async def create(
        self,
        db: AsyncSession,
        obj_data: dict[str, Any],
    ) -> ModelType:
        """새 레코드를 생성합니다.

        Create a new record in the database.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            obj_data: 생성할 레코드의 데이터 딕셔너리
                      (Dictionary of data for the new record)

        Returns:
            ModelType: 생성된 레코드 (The created record)
        """
        db_obj: ModelType = self.model(**obj_data)
        db.add(db_obj)
        await db.flush()
        await db.refresh(db_obj)
        return db_obj

    async def update(
        self,
        db: AsyncSession,
        record_id: UUID,
        update_data: dict[str, Any],
    ) -> ModelType | None:
        """기존 레코드를 업데이트합니다.

        Update an existing live record by its UUID.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            record_id: 업데이트할 레코드의 UUID (UUID of the record to update)
            update_data: 업데이트할 필드와 값의 딕셔너리
                         (Dictionary of fields and values to update)

        Returns:
            ModelType | None: 업데이트된 레코드 또는 None (Updated record or None)
        """
        db_obj: ModelType | None = await self.get_by_id(db, record_id)
        if db_obj is None:
            return None

        for field, value in update_data.items():
            if hasattr(db_obj, field):
                setattr(db_obj, field, value)

        await db.flush()
        await db.refresh(db_obj)
        return db_obj

    async def soft_delete(
        self,
        db: AsyncSession,
        record_id: UUID,
    ) -> bool:
        """레코드를 소프트 삭제합니다 (deleted_at 기록).

        Soft-delete a live record by stamping ``deleted_at``.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            record_id: 삭제할 레코드의 UUID (UUID of the record to delete)

        Returns:
            bool: 삭제 여부, 이미 삭제되었거나 없으면 False
                  (False when the record is missing or already deleted)
        """
        db_obj: ModelType | None = await self.get_by_id(db, record_id)
        if db_obj is None:
            return False

        db_obj.deleted_at = datetime.now(timezone.utc)
        await db.flush()
        return True
