import os
import json
from typing import List, Optional, Union

from dotenv import load_dotenv
from pydantic_settings import BaseSettings
from pydantic import field_validator

project_root = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
env_path = os.path.join(project_root, '.env')
load_dotenv(env_path)


class Settings(BaseSettings):
    # 基本设置
    PROJECT_NAME: str = "TwelveFactor"
    VERSION: str = "0.1.0"

    # CORS 设置
    CORS_ORIGINS: List[str] = ["*"]

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> List[str]:
        if isinstance(v, str):
            # 如果是一个字符串，尝试将其解析为JSON数组
            try:
                return json.loads(v)
            except json.JSONDecodeError:
                # 普通的逗号分隔字符串
                return [i.strip() for i in v.split(",") if i.strip()]

        if isinstance(v, list):
            return v

        return []

    # 数据库设置
    DB_DRIVER: str = "sqlite"
    DB_HOST: str = "localhost"
    DB_PORT: str = "3306"
    DB_USER: str = "root"
    DB_PASSWORD: str = "password"
    DB_NAME: str = "twelve_factor"

    # 显式指定时优先使用
    DATABASE_URI: Optional[str] = None

    @property
    def SQLALCHEMY_DATABASE_URI(self) -> str:
        """
        获取数据库URI
        """
        if self.DATABASE_URI:
            return self.DATABASE_URI

        if self.DB_DRIVER == "mysql":
            return f"mysql+pymysql://{self.DB_USER}:{self.DB_PASSWORD}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"

        # 默认使用本地SQLite文件
        return f"sqlite:///./{self.DB_NAME}.db"

    # 是否自动创建数据库表结构
    CREATE_TABLES: bool = True

    # 服务器启动配置
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    RELOAD: bool = False

    # 优雅停机配置
    GRACEFUL_WAIT_SECONDS: float = 20
    # 停机时等待进行中请求完成的最长时间（秒），需大于 GRACEFUL_WAIT_SECONDS
    SHUTDOWN_TIMEOUT: int = 30

    # 日志配置
    LOG_LEVEL: str = "INFO"
    LOG_DIR: Optional[str] = None

    class Config:
        case_sensitive = True
        env_file = ".env"


# 创建设置实例
settings = Settings()
