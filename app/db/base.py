import logging
from typing import Any, Dict

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Dialect, make_url
from sqlalchemy.ext.declarative import declarative_base
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlalchemy.sql.elements import TextClause

from app.core.config import settings

logger = logging.getLogger(__name__)


def build_engine_options(database_uri: str) -> Dict[str, Any]:
    """
    根据数据库类型生成引擎参数

    SQLite 需要允许跨线程使用连接（请求在线程池中处理），内存库还需共享同一连接；
    其他数据库使用连接池设置。
    """
    url = make_url(database_uri)
    if url.get_backend_name() == "sqlite":
        options: Dict[str, Any] = {
            "connect_args": {"check_same_thread": False, "timeout": 15},
        }
        if url.database in (None, "", ":memory:"):
            options["poolclass"] = StaticPool
        return options

    return {
        "pool_pre_ping": True,
        "pool_size": 10,
        "max_overflow": 20,
        "pool_recycle": 3600,
    }


# 创建数据库引擎
engine = create_engine(
    settings.SQLALCHEMY_DATABASE_URI,
    # 启用回显SQL语句，便于调试
    echo=False,
    **build_engine_options(settings.SQLALCHEMY_DATABASE_URI)
)

# 创建数据库会话
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# 创建基本模型类
Base = declarative_base()


def create_database_statement(dialect: Dialect, db_name: str) -> TextClause:
    """
    生成建库语句，库名按方言规则转义后加引号
    """
    quoted = dialect.identifier_preparer.quote_identifier(db_name)
    return text(f"CREATE DATABASE {quoted} CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci")


def ensure_mysql_database(database_uri: str) -> None:
    """
    MySQL 下若目标数据库不存在则先创建
    """
    url = make_url(database_uri)
    db_name = url.database
    # 创建一个不指定数据库的临时引擎来执行创建数据库的操作
    temp_engine = create_engine(url.set(database=None))
    try:
        with temp_engine.connect() as connection:
            result = connection.execute(text("SHOW DATABASES LIKE :db_name"), {"db_name": db_name})
            if not result.fetchone():
                connection.execute(create_database_statement(temp_engine.dialect, db_name))
                logger.info(f"数据库 {db_name} 已创建")
            else:
                logger.info(f"数据库 {db_name} 已存在")
    finally:
        temp_engine.dispose()


# 创建数据库和表
def init_db():
    """
    初始化数据库，如果表不存在则创建
    """
    if not settings.CREATE_TABLES:
        logger.info("自动创建表功能已禁用")
        return

    # 导入时注册模型
    from app.db.init_db import create_tables

    try:
        if engine.url.get_backend_name() == "mysql":
            ensure_mysql_database(settings.SQLALCHEMY_DATABASE_URI)

        # 创建所有表
        create_tables()
        logger.info("所有表已创建或已存在")
    except Exception as e:
        logger.error(f"初始化数据库时出错: {str(e)}")
        raise  # 重新抛出异常，以便在应用启动时捕获
