"""データベースモデルを一括エクスポートするモジュール.

新しいモデルを追加する際は、ここにインポート文を1行追加するだけで
SQLModel.metadata に登録され、テーブル作成の対象になります。

Example:
-------
    新しいモデル `Team` を追加した場合:
    ```python
    from .team import TeamEntity
    ```

"""

from .avenger import AvengerEntity

__all__ = ["AvengerEntity"]
