from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

# number 列为 32 位整数
INT32_MIN = -2 ** 31
INT32_MAX = 2 ** 31 - 1


class FactorPayload(BaseModel):
    """
    Factor 请求模型

    用于创建和更新接口的请求数据。所有字段均可为空；
    请求中的 id 会被忽略，旧版字段名 statement 作为 description 的别名接收。
    """
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    number: Optional[int] = Field(default=None, ge=INT32_MIN, le=INT32_MAX)
    name: Optional[str] = None
    description: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("description", "statement"),
    )

    def full_fields(self) -> dict:
        """整体替换（PUT）使用的字段，未提供的字段置空"""
        return self.model_dump()

    def patch_fields(self) -> dict:
        """局部更新（PATCH）使用的字段，仅包含请求中显式出现的字段"""
        return self.model_dump(exclude_unset=True)
