from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
import logging
import traceback

from app.api.v1.api import api_router
from app.core.config import settings
from app.db.base import engine, init_db
from app.infrastructure.exceptions import StorageUnavailableError
from app.infrastructure.response import standard_response, error_response, not_found_response
from app.services.exceptions import NotFoundError

logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Twelve-Factor Factor 管理API"
)

# 配置CORS - 重要: 必须在其他中间件之前添加
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Location"]
)


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    """资源不存在，返回404"""
    return JSONResponse(
        content=not_found_response(entity=exc.entity, entity_id=exc.entity_id),
        status_code=404
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """请求参数或请求体格式错误，返回400"""
    return JSONResponse(
        content=error_response(
            msg="请求参数错误",
            code=400,
            data=jsonable_encoder(exc.errors())
        ),
        status_code=400
    )


@app.exception_handler(StorageUnavailableError)
async def storage_unavailable_handler(request: Request, exc: StorageUnavailableError) -> JSONResponse:
    """数据库不可用，返回503"""
    logger.error(f"数据库不可用: {str(exc)}")
    logger.error("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)))
    return JSONResponse(
        content=error_response(msg="数据库不可用", code=503),
        status_code=503
    )


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """其他数据库错误，返回500"""
    logger.error(f"数据库错误: {str(exc)}")
    logger.error("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)))
    return JSONResponse(
        content=error_response(msg="服务器内部错误", code=500),
        status_code=500
    )


# 包含API路由
app.include_router(api_router)


@app.on_event("startup")
async def startup_db_client():
    """
    应用启动时初始化数据库
    """
    logger.info("正在初始化数据库...")
    try:
        init_db()
        logger.info("数据库初始化成功")
    except Exception as e:
        logger.error(f"数据库初始化失败: {str(e)}")
        # 打印详细的堆栈跟踪信息，便于调试
        logger.error(traceback.format_exc())
        # 数据库不可用时应用仍继续启动，相关请求将返回503
        logger.warning("应用将继续启动，但数据库功能可能不可用")


@app.on_event("shutdown")
async def shutdown_event():
    """
    进行中的请求处理完毕后释放数据库连接
    """
    engine.dispose()
    logger.info("服务已停止，数据库连接已释放")


@app.get("/")
async def root():
    """健康检查接口"""
    return standard_response(
        data={
            "status": "online",
            "version": settings.VERSION
        },
        msg=f"{settings.PROJECT_NAME} API服务正在运行"
    )
