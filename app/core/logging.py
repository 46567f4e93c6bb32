import logging
import os
import sys
from datetime import datetime
from typing import Optional

from app.core.config import settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: Optional[str] = None, log_dir: Optional[str] = None) -> Optional[str]:
    """
    配置根日志记录器

    日志始终输出到标准输出；若配置了日志目录，则额外按启动时间生成日志文件。

    参数:
        level: 日志级别，默认取 settings.LOG_LEVEL
        log_dir: 日志文件目录，默认取 settings.LOG_DIR

    返回:
        Optional[str]: 日志文件路径，未启用文件日志时为 None
    """
    level = (level or settings.LOG_LEVEL).upper()
    log_dir = log_dir if log_dir is not None else settings.LOG_DIR

    # 创建logger
    logger = logging.getLogger()
    logger.setLevel(level)

    formatter = logging.Formatter(LOG_FORMAT)

    # 创建控制台处理器
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    # 清除可能已存在的处理器，然后添加新的处理器
    logger.handlers = []
    logger.addHandler(console_handler)

    log_filename = None
    if log_dir:
        # 创建logs目录（如果不存在）
        os.makedirs(log_dir, exist_ok=True)
        log_filename = os.path.join(log_dir, f"app_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log")
        file_handler = logging.FileHandler(log_filename, encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # 降低watchfiles日志级别，避免频繁输出
    logging.getLogger('watchfiles').setLevel(logging.ERROR)
    logging.getLogger('watchfiles.main').setLevel(logging.ERROR)

    return log_filename
