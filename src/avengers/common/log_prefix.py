"""ログプレフィックス定数."""


class LogPrefix:
    """ロギング用プレフィックス定数."""

    AVENGER_API = "[AVENGER_API]"
    DB_INIT = "[DB_INIT]"
    STORAGE_ERROR = "[STORAGE_ERROR]"
