#!/usr/bin/env python3
import logging

import uvicorn

from app.core.config import settings
from app.core.logging import setup_logging
from app.server import create_server

# 配置日志
log_filename = setup_logging()
logger = logging.getLogger()


def main() -> None:
    logger.info(f"启动API服务 - 监听 {settings.HOST}:{settings.PORT}")
    if log_filename:
        logger.info(f"日志文件路径: {log_filename}")

    if settings.RELOAD:
        # 开发模式：热重载需要以导入字符串方式启动
        uvicorn.run(
            "app.main:app",
            host=settings.HOST,
            port=settings.PORT,
            reload=True,
            timeout_graceful_shutdown=settings.SHUTDOWN_TIMEOUT,
            log_config=None,
        )
        return

    create_server().run()
    logger.info("API服务已退出")


if __name__ == "__main__":
    main()
