"""
优雅停机探测接口

请求保持指定时长后才返回，用于验证进程停机时会等待进行中的请求完成。
"""
import asyncio
import logging

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from app.core.config import settings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/graceful-wait", response_class=PlainTextResponse)
async def wait_graceful():
    # 异步等待，不占用线程池和数据库连接，也不阻塞其他请求
    seconds = settings.GRACEFUL_WAIT_SECONDS
    logger.info(f"开始等待 {seconds:g} 秒")
    await asyncio.sleep(seconds)
    logger.info(f"等待 {seconds:g} 秒结束")
    return f"I waited for {seconds:g} seconds"
