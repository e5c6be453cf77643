"""アプリケーション起動処理のテスト."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine, inspect
from sqlalchemy.dialects import postgresql
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.schema import CreateTable

from avengers import main
from avengers.database.model.avenger import AvengerEntity


def _table_names(db_path: Path) -> list[str]:
    return inspect(create_engine(f"sqlite:///{db_path}")).get_table_names()


@pytest.mark.parametrize("create_tables", [True, False])
async def test_lifespan_creates_tables_only_when_enabled(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    create_tables: bool,
) -> None:
    db_path = tmp_path / "avengers.db"
    monkeypatch.setattr(
        main,
        "async_engine",
        create_async_engine(f"sqlite+aiosqlite:///{db_path}"),
    )
    monkeypatch.setattr(
        main.settings, "create_tables_on_startup", create_tables
    )

    async with main.lifespan(main.app):
        pass

    assert ("avengers" in _table_names(db_path)) is create_tables


def test_run_starts_uvicorn(monkeypatch: pytest.MonkeyPatch) -> None:
    uvicorn_run = MagicMock()
    monkeypatch.setattr(main.uvicorn, "run", uvicorn_run)

    main.run()

    uvicorn_run.assert_called_once_with(
        "avengers.main:app",
        host=main.settings.host,
        port=main.settings.port,
        log_level=main.settings.log_level.lower(),
    )


def test_id_column_is_bigint_on_postgres() -> None:
    ddl = str(
        CreateTable(AvengerEntity.__table__).compile(  # type: ignore[attr-defined]
            dialect=postgresql.dialect()
        )
    )

    assert "id BIGSERIAL" in ddl
