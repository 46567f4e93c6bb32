from typing import Dict, Any

from sqlalchemy import Column, Integer, VARCHAR, TEXT

from app.db.base import Base

# 可写字段，id 由数据库分配
FACTOR_FIELDS = ("number", "name", "description")


class Factor(Base):
    """
    Factor 数据库模型

    唯一的持久化实体：带编号、名称和描述的条目
    """
    __tablename__ = "t_factor"

    # Integer 主键在 SQLite/MySQL 下均为自增
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    number = Column(Integer, nullable=True)
    name = Column(VARCHAR(255), nullable=True)
    description = Column(TEXT, nullable=True)

    def to_dict(self) -> Dict[str, Any]:
        """将 Factor 转换为字典表示形式，值为空的字段不输出"""
        result = {"id": self.id}
        for field in FACTOR_FIELDS:
            value = getattr(self, field)
            if value is not None:
                result[field] = value
        return result

    def __repr__(self) -> str:
        return f"<Factor id={self.id} number={self.number} name={self.name!r}>"
