"""配置管理模块。

支持从环境变量、.env、config.yaml 加载配置，优先级依次降低。
默认值即为官方安卓客户端的参考配置（access_key 为空即未登录模式）。
"""

import logging
import os
import warnings
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _load_config_from_yaml() -> Dict[str, Any]:
    """从 config.yaml 加载配置（若存在）。"""
    candidates = []
    explicit = os.getenv("BILICHAT_CONFIG_FILE")
    if explicit:
        candidates.append(Path(explicit).expanduser())
    candidates.extend([
        Path.cwd() / "config.yaml",
        Path(__file__).resolve().parents[2] / "config.yaml",
    ])

    seen: set[Path] = set()
    for path in candidates:
        if path in seen:
            continue
        seen.add(path)
        try:
            if path.exists():
                data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
                if isinstance(data, dict):
                    return data
                warnings.warn(f"Config file {path} is not a mapping, ignored")
        except (OSError, yaml.YAMLError) as exc:
            warnings.warn(f"Failed to read config file {path}: {exc}")
    return {}


class Settings(BaseSettings):
    """配置设置（使用 Pydantic）。"""

    # ---- gRPC 连接 ----
    grpc_target: str = Field(default="grpc.biliapi.net:443", description="B站 gRPC 网关地址")
    access_key: str = Field(default="", description="登录后的 access_key，留空为未登录模式")
    keepalive_time: float = Field(default=10.0, gt=0, description="keepalive ping 间隔（秒）")
    keepalive_timeout: float = Field(default=10.0, gt=0, description="keepalive 超时（秒）")
    keepalive_permit_without_calls: bool = Field(
        default=True,
        description="没有进行中的调用时也发送 keepalive",
    )
    rpc_timeout: Optional[float] = Field(
        default=None,
        gt=0,
        description="单次 RPC 超时（秒），默认不设置 deadline",
    )

    # ---- 轮询 ----
    poll_interval: float = Field(default=1.0, ge=0, description="获取结果失败后的等待时间（秒）")
    poll_max_retries: int = Field(default=10, ge=0, description="首次之外的最大重试次数")

    # ---- 设备标识（x-bili-*-bin 头） ----
    mobi_app: str = "android"
    device: str = "phone"
    build: int = 6830300
    channel: str = "bili"
    buvid: str = "XX82B818F96FB2F312B3A1BA44DB41892FF99"
    platform: str = "android"
    timezone: str = "Asia/Shanghai"

    # ---- 日志 ----
    log_dir: str = Field(default="logs", description="日志目录")
    log_level: str = Field(default="INFO", description="日志级别")
    log_redact_content: bool = Field(default=False, description="是否截断日志内容")
    console_log_level: str = Field(default="INFO", description="终端（stderr）日志级别")

    model_config = SettingsConfigDict(
        env_prefix="BILICHAT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @staticmethod
    def _config_source() -> Dict[str, Any]:
        return _load_config_from_yaml()

    @field_validator("log_level", "console_log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v!r}")
        return level

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            cls._config_source,
            file_secret_settings,
        )


settings = Settings()
