"""Keep PostgreSQL id sequences in step after rows are inserted with explicit ids."""

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession


async def resync_id_sequences(db: AsyncSession, table_names: list[str]) -> None:
    """Point each table's id sequence past its current max id. No-op outside PostgreSQL."""
    if db.get_bind().dialect.name != "postgresql":
        return
    for table in table_names:
        await db.execute(
            text(
                f"SELECT setval(pg_get_serial_sequence('{table}', 'id'), "
                f"COALESCE((SELECT MAX(id) FROM {table}), 1), "
                f"(SELECT MAX(id) FROM {table}) IS NOT NULL)"
            )
        )
