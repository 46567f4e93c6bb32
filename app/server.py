"""
服务器组装

停机信号到达后监听套接字立即关闭（新连接被拒绝），进行中的请求最多等待
SHUTDOWN_TIMEOUT 秒完成后进程再退出。
"""
import logging
from typing import Optional

import uvicorn

from app.core.config import settings

logger = logging.getLogger(__name__)


def create_server(
        host: Optional[str] = None,
        port: Optional[int] = None,
        shutdown_timeout: Optional[int] = None,
) -> uvicorn.Server:
    """
    创建 uvicorn 服务实例

    参数:
        host: 监听地址，默认取 settings.HOST
        port: 监听端口，默认取 settings.PORT
        shutdown_timeout: 停机等待时长（秒），默认取 settings.SHUTDOWN_TIMEOUT

    返回:
        uvicorn.Server: 未启动的服务实例
    """
    config = uvicorn.Config(
        "app.main:app",
        host=host or settings.HOST,
        port=port if port is not None else settings.PORT,
        timeout_graceful_shutdown=shutdown_timeout if shutdown_timeout is not None else settings.SHUTDOWN_TIMEOUT,
        # 日志由 setup_logging 统一配置
        log_config=None,
    )
    return uvicorn.Server(config)
