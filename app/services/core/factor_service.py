import logging
from typing import List

from sqlalchemy.exc import InvalidRequestError, OperationalError, SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from app.infrastructure.exceptions import StorageUnavailableError
from app.models.factor import Factor
from app.schemas.factor import FactorPayload
from app.services.exceptions import FactorNotFoundError

logger = logging.getLogger(__name__)


class FactorService:
    """
    Factor 增删改查服务

    每个实例绑定一个数据库会话，每个写操作在独立事务中提交；
    出错时回滚会话后再抛出异常。
    """

    def __init__(self, db: Session):
        self.db = db

    def _rollback(self) -> None:
        try:
            self.db.rollback()
        except SQLAlchemyError:
            logger.exception("回滚事务失败")

    def list_factors(self) -> List[Factor]:
        """获取全部 Factor，按 id 排序"""
        try:
            return self.db.query(Factor).order_by(Factor.id).all()
        except OperationalError as e:
            self._rollback()
            raise StorageUnavailableError(f"查询Factor列表失败: {str(e)}") from e

    def get_factor(self, factor_id: int) -> Factor:
        """
        根据ID获取 Factor

        Raises:
            FactorNotFoundError: 不存在该ID的记录
        """
        try:
            factor = self.db.get(Factor, factor_id)
        except OperationalError as e:
            self._rollback()
            raise StorageUnavailableError(f"查询Factor失败: {str(e)}") from e

        if factor is None:
            logger.debug(f"Factor {factor_id} 不存在")
            raise FactorNotFoundError(factor_id)
        return factor

    def create_factor(self, payload: FactorPayload) -> Factor:
        """
        创建 Factor

        请求中的 id 不参与写入，由数据库分配新的 id
        """
        factor = Factor(**payload.full_fields())
        try:
            self.db.add(factor)
            self.db.commit()
            # 刷新以获取自动生成的属性
            self.db.refresh(factor)
        except OperationalError as e:
            self._rollback()
            raise StorageUnavailableError(f"创建Factor失败: {str(e)}") from e
        except SQLAlchemyError:
            self._rollback()
            raise

        logger.info(f"成功创建Factor: {factor.id}")
        return factor

    def update_factor(self, factor_id: int, payload: FactorPayload, partial: bool = False) -> Factor:
        """
        更新 Factor

        Args:
            factor_id: Factor ID
            payload: 请求数据
            partial: True 时仅更新请求中出现的字段（PATCH），否则整体替换（PUT）

        Raises:
            FactorNotFoundError: 记录不存在，或在更新过程中被并发删除
        """
        factor = self.get_factor(factor_id)
        fields = payload.patch_fields() if partial else payload.full_fields()
        try:
            for key, value in fields.items():
                setattr(factor, key, value)
            self.db.commit()
            self.db.refresh(factor)
        except (StaleDataError, InvalidRequestError) as e:
            # 读取之后记录已被其他请求删除：有字段变化时 UPDATE 匹配0行，无变化时 refresh 找不到记录
            self._rollback()
            raise FactorNotFoundError(factor_id) from e
        except OperationalError as e:
            self._rollback()
            raise StorageUnavailableError(f"更新Factor失败: {str(e)}") from e
        except SQLAlchemyError:
            self._rollback()
            raise

        logger.info(f"成功更新Factor: {factor_id}")
        return factor

    def delete_factor(self, factor_id: int) -> None:
        """
        删除 Factor

        Raises:
            FactorNotFoundError: 不存在该ID的记录
        """
        try:
            deleted = (
                self.db.query(Factor)
                .filter(Factor.id == factor_id)
                .delete(synchronize_session=False)
            )
            self.db.commit()
        except OperationalError as e:
            self._rollback()
            raise StorageUnavailableError(f"删除Factor失败: {str(e)}") from e
        except SQLAlchemyError:
            self._rollback()
            raise

        if not deleted:
            raise FactorNotFoundError(factor_id)
        logger.info(f"成功删除Factor: {factor_id}")
