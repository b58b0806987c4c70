from pydantic import Field
from pydantic_settings import BaseSettings
from functools import lru_cache
import logging

from core.room import RoomLimits

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    # 雲端變數的限制，啟動後不再變動
    max_variables: int = Field(10, gt=0)
    max_name_length: int = Field(100, gt=0)
    max_value_length: int = Field(1000, gt=0)
    name_prefix: str = Field("☁ ", min_length=1)

    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "CLOUD_"

    def room_limits(self) -> RoomLimits:
        """
        將設定轉成不可變的 RoomLimits

        返回：
            RoomLimits（frozen dataclass），可直接注入 Room
        """
        limits = RoomLimits(
            max_variables=self.max_variables,
            max_name_length=self.max_name_length,
            max_value_length=self.max_value_length,
            name_prefix=self.name_prefix,
        )
        logger.debug(f"Room limits: {limits}")
        return limits


@lru_cache()
def get_settings():
    return Settings()
