"""Exception types that mean the data store could not answer a query."""

from sqlalchemy.exc import SQLAlchemyError

# asyncpg surfaces refused connections, DNS failures and connect timeouts
# as OSError/TimeoutError without SQLAlchemy wrapping them.
STORE_FAILURES: tuple[type[BaseException], ...] = (SQLAlchemyError, OSError, TimeoutError)
