"""Session handling shared by the SQLAlchemy stores."""

from types import TracebackType
from typing import Self

from sqlalchemy.ext.asyncio import AsyncSession

from idstore.exceptions import StoreDisposedError
from idstore.stores._guards import require


class SQLAlchemyStore:
    """
    Holds the caller's session for a store.

    The session is never committed or closed here; ``dispose`` only drops
    the reference, after which every operation raises StoreDisposedError.
    """

    def __init__(self, session: AsyncSession | None) -> None:
        self._session: AsyncSession | None = require(session, "session")

    @property
    def session(self) -> AsyncSession:
        if self._session is None:
            raise StoreDisposedError(type(self).__name__)
        return self._session

    @property
    def is_disposed(self) -> bool:
        return self._session is None

    def dispose(self) -> None:
        self._session = None

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.dispose()
