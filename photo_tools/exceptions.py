"""
カスタム例外クラス定義

photo_toolsで使用する例外クラスを定義します。
"""


class ProcessingError(Exception):
    """処理エラーの基底クラス"""
    pass


class ValidationError(ProcessingError):
    """検証エラー"""
    pass


class InvalidConfigError(ValidationError):
    """拡張子設定・処理モードが不正な場合のエラー"""
    pass


class DirectoryUnreadableError(ValidationError):
    """対象ディレクトリを読み取れない場合のエラー"""
    pass


class FileOperationError(ProcessingError):
    """ファイル操作エラー"""
    pass


class ActionFailedError(FileOperationError):
    """移動・削除アクションの実行失敗"""

    def __init__(self, action, cause: str):
        self.action = action
        self.cause = cause
        super().__init__(f"{action.source}: {cause}")
