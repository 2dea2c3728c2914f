from sqlalchemy.exc import DBAPIError, SQLAlchemyError


def storage_error_details(exc: SQLAlchemyError) -> tuple[str | None, str | None]:
    """Return (error code, SQLSTATE) carried by a SQLAlchemy/DBAPI error, if any."""
    code = getattr(exc, "code", None)
    sqlstate = None
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        orig = exc.orig
        # psycopg 3 exposes .sqlstate, psycopg2 .pgcode; sqlite3 has .sqlite_errorname
        sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
        code = getattr(orig, "sqlite_errorname", None) or code
    return code, sqlstate
