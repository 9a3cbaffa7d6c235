import contextlib
import logging
from typing import Iterator

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Integer,
    MetaData,
    String,
    Table,
    create_engine,
    event,
    func,
)
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.pool import StaticPool

from config import settings

logger = logging.getLogger("pedidos-api")

metadata = MetaData()

restaurantes = Table(
    "restaurantes",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("nombre", String(200), nullable=False),
    Column("telefono", String(50)),
    Column("direccion", String(300)),
)

menu_items = Table(
    "menu_items",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("nombre", String(200), nullable=False),
    Column("precio", Integer, nullable=False),
    Column(
        "restaurante_id",
        Integer,
        ForeignKey("restaurantes.id", ondelete="CASCADE"),
        nullable=False,
    ),
)

usuarios = Table(
    "usuarios",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("nombre", String(200), nullable=False),
)

pedidos = Table(
    "pedidos",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("restaurante_id", Integer, ForeignKey("restaurantes.id"), nullable=False),
    Column(
        "usuario_responsable_id", Integer, ForeignKey("usuarios.id"), nullable=False
    ),
    Column("valor_domicilio", Integer, nullable=False, default=0),
    Column("total_pedido", Integer, nullable=False, default=0),
    Column("estado", String(30), nullable=False, server_default="activo"),
    Column("fecha_pedido", DateTime, nullable=False, server_default=func.now()),
)

pedido_items = Table(
    "pedido_items",
    metadata,
    Column("id", Integer, primary_key=True),
    Column(
        "pedido_id",
        Integer,
        ForeignKey("pedidos.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("usuario_id", Integer, ForeignKey("usuarios.id"), nullable=False),
    Column("menu_item_id", Integer, ForeignKey("menu_items.id"), nullable=False),
    Column("cantidad", Integer, nullable=False),
    Column("precio_unitario", Integer, nullable=False),
    Column("subtotal", Integer, nullable=False),
)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def _create_engine(url: str) -> Engine:
    if url.startswith("sqlite"):
        # in-memory databases only live as long as their single connection
        sqlite_engine = create_engine(
            url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        event.listen(sqlite_engine, "connect", _enable_sqlite_foreign_keys)
        return sqlite_engine
    return create_engine(url, pool_size=settings.db_pool_size, pool_pre_ping=True)


engine = _create_engine(settings.database_url)


@contextlib.contextmanager
def read_connection() -> Iterator[Connection]:
    with engine.connect() as conn:
        yield conn


@contextlib.contextmanager
def transaction() -> Iterator[Connection]:
    """Check out one connection and run a single transaction on it.

    Commits when the block exits normally and rolls back on any exception,
    which is re-raised. The connection goes back to the pool on every path.
    """
    conn = engine.connect()
    trans = conn.begin()
    try:
        yield conn
        trans.commit()
    except Exception as exc:
        trans.rollback()
        logger.warning("Transaction rolled back: %s", type(exc).__name__)
        raise
    finally:
        conn.close()
