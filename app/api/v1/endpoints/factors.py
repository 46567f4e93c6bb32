"""
Factor 资源接口模块

提供 Factor 的增删改查 RESTful 接口。处理函数为同步函数，由 FastAPI 放入线程池执行，
数据库访问不会阻塞事件循环。
"""
import logging

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse

from app.api.dependencies import get_factor_service
from app.schemas.factor import FactorPayload
from app.services import FactorService

# 配置日志记录器
logger = logging.getLogger(__name__)

# 创建API路由实例
router = APIRouter()


# 获取 Factor 列表接口
@router.get("")
def list_factors(
        service: FactorService = Depends(get_factor_service),
):
    """
    获取全部 Factor

    Returns:
        list: Factor 列表
    """
    return [factor.to_dict() for factor in service.list_factors()]


# 获取 Factor 详情接口
@router.get("/{factor_id}", name="get_factor")
def get_factor(
        factor_id: int,  # Factor ID，从URL路径中提取
        service: FactorService = Depends(get_factor_service),
):
    """
    根据ID获取 Factor，不存在时返回404
    """
    return service.get_factor(factor_id).to_dict()


# 创建 Factor 接口
@router.post("", status_code=status.HTTP_201_CREATED)
def create_factor(
        payload: FactorPayload,
        request: Request,
        service: FactorService = Depends(get_factor_service),
):
    """
    创建新的 Factor

    请求体中的 id 会被忽略。返回201及新建记录，Location 头指向新资源。
    """
    factor = service.create_factor(payload)
    return JSONResponse(
        content=factor.to_dict(),
        status_code=status.HTTP_201_CREATED,
        headers={"Location": str(request.url_for("get_factor", factor_id=factor.id))},
    )


# 整体替换 Factor 接口
@router.put("/{factor_id}")
def replace_factor(
        factor_id: int,
        payload: FactorPayload,
        service: FactorService = Depends(get_factor_service),
):
    """
    整体替换 Factor，请求中未提供的字段将被置空
    """
    return service.update_factor(factor_id, payload, partial=False).to_dict()


# 局部更新 Factor 接口
@router.patch("/{factor_id}")
def patch_factor(
        factor_id: int,
        payload: FactorPayload,
        service: FactorService = Depends(get_factor_service),
):
    """
    局部更新 Factor，仅修改请求中出现的字段
    """
    return service.update_factor(factor_id, payload, partial=True).to_dict()


# 删除 Factor 接口
@router.delete("/{factor_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_factor(
        factor_id: int,
        service: FactorService = Depends(get_factor_service),
):
    """
    根据ID删除 Factor，不存在时返回404
    """
    service.delete_factor(factor_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
