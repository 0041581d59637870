"""
統合テスト

エンドツーエンドの処理フローをテストします。
一時ディレクトリに写真ファイルを作成し、コマンドラインから
孤立ファイルの移動・削除・ドライランが正しく動作することを確認します。
"""

import tempfile
from pathlib import Path
from unittest.mock import patch
import pytest

from photo_tools.cleanup_manager import CleanupManager
from photo_tools.cli import create_parser, main
from photo_tools.exceptions import ValidationError
from photo_tools.models import ExtensionConfig, FileClass
from photo_tools.planner import DispositionMode


SESSION_FILES = [
    "DSCF5341.JPG",
    "DSCF5356.JPG",
    "DSCF5356.RAF",
    "DSCF5357.JPG",
    "DSCF5357.RAF",
    "DSCF5358.JPG",
    "DSCF5358.RAF",
    "DSCF5359.RAF",
]


class TestIntegration:
    """統合テストクラス"""

    @pytest.fixture
    def photo_dir(self) -> Path:
        """撮影セッションのファイルを含む一時ディレクトリを作成"""
        with tempfile.TemporaryDirectory() as temp_dir:
            temp_path = Path(temp_dir)
            for name in SESSION_FILES:
                (temp_path / name).write_bytes(f"content of {name}".encode())
            (temp_path / "DSCF5341.xmp").write_text("sidecar")
            yield temp_path

    @pytest.fixture
    def log_file(self):
        """詳細モードのログファイルを一時ディレクトリに出力"""
        with tempfile.TemporaryDirectory() as temp_dir:
            path = Path(temp_dir) / "photo_tools.log"
            with patch('photo_tools.cleanup_manager.get_default_log_file', return_value=path):
                yield path

    def _names(self, directory: Path) -> set:
        return {p.name for p in directory.iterdir() if p.is_file()}

    def test_img_mode_moves_orphan_jpg(self, photo_dir: Path, capsys):
        """IMGモード: RAFのないJPGをto_deleteへ移動"""
        exit_code = main(["IMG", "--path", str(photo_dir)])

        assert exit_code == 0
        assert not (photo_dir / "DSCF5341.JPG").exists()
        assert (photo_dir / "to_delete" / "DSCF5341.JPG").read_bytes() == b"content of DSCF5341.JPG"
        assert self._names(photo_dir / "to_delete") == {"DSCF5341.JPG"}
        # その他のファイルとRAFのみのファイルはそのまま
        assert (photo_dir / "DSCF5341.xmp").exists()
        assert (photo_dir / "DSCF5359.RAF").exists()

        out = capsys.readouterr().out
        assert "DSCF5341.JPG" in out
        assert "to_delete" in out

    def test_raw_mode_moves_orphan_raf(self, photo_dir: Path):
        """RAWモード: JPGのないRAFをto_deleteへ移動"""
        exit_code = main(["raw", "-p", str(photo_dir)])

        assert exit_code == 0
        assert self._names(photo_dir / "to_delete") == {"DSCF5359.RAF"}
        assert (photo_dir / "DSCF5341.JPG").exists()

    def test_delete_mode(self, photo_dir: Path):
        """--delete: 孤立ファイルを直接削除し、移動先フォルダは作成しない"""
        exit_code = main(["IMG", "-p", str(photo_dir), "--delete"])

        assert exit_code == 0
        assert not (photo_dir / "DSCF5341.JPG").exists()
        assert not (photo_dir / "to_delete").exists()
        assert len(self._names(photo_dir)) == len(SESSION_FILES)

    def test_dry_run_changes_nothing(self, photo_dir: Path, capsys):
        """--dry-run: ファイルを変更しない"""
        before = self._names(photo_dir)

        exit_code = main(["RAW", "-p", str(photo_dir), "--dry-run", "--delete"])

        assert exit_code == 0
        assert self._names(photo_dir) == before
        assert "DSCF5359.RAF" in capsys.readouterr().out

    def test_custom_dest_dir(self, photo_dir: Path):
        """--dest-dir: 移動先サブフォルダ名を指定"""
        exit_code = main(["IMG", "-p", str(photo_dir), "--dest-dir", "orphans"])

        assert exit_code == 0
        assert (photo_dir / "orphans" / "DSCF5341.JPG").exists()
        assert not (photo_dir / "to_delete").exists()

    def test_custom_extensions(self):
        """-r / -j: 拡張子を指定（大文字小文字は区別しない）"""
        with tempfile.TemporaryDirectory() as temp_dir:
            temp_path = Path(temp_dir)
            for name in ["DSC001.arw", "DSC001.jpeg", "DSC002.ARW", "DSC003.JPEG"]:
                (temp_path / name).write_bytes(b"data")

            exit_code = main(["RAW", "-p", str(temp_path), "-r", "ARW", "-j", "JPEG"])

            assert exit_code == 0
            assert self._names(temp_path / "to_delete") == {"DSC002.ARW"}

    def test_ignore_case(self):
        """--ignore-case: ベースIDの大文字小文字を無視"""
        with tempfile.TemporaryDirectory() as temp_dir:
            temp_path = Path(temp_dir)
            for name in ["dscf0001.jpg", "DSCF0001.RAF"]:
                (temp_path / name).write_bytes(b"data")

            assert main(["IMG", "-p", str(temp_path), "-i", "-n"]) == 0
            assert main(["IMG", "-p", str(temp_path), "--ignore-case"]) == 0
            assert not (temp_path / "to_delete").exists()

            assert main(["IMG", "-p", str(temp_path)]) == 0
            assert self._names(temp_path / "to_delete") == {"dscf0001.jpg"}

    def test_destination_collision_reports_failure(self, photo_dir: Path, capsys):
        """移動先に同名ファイルがある場合は終了コード1"""
        (photo_dir / "to_delete").mkdir()
        (photo_dir / "to_delete" / "DSCF5341.JPG").write_bytes(b"older copy")

        exit_code = main(["IMG", "-p", str(photo_dir)])

        assert exit_code == 1
        assert (photo_dir / "DSCF5341.JPG").exists()
        assert (photo_dir / "to_delete" / "DSCF5341.JPG").read_bytes() == b"older copy"
        assert "❌" in capsys.readouterr().err

    def test_subdirectories_are_ignored(self, photo_dir: Path):
        """サブフォルダ内のファイルは対象外"""
        nested = photo_dir / "selects"
        nested.mkdir()
        (nested / "DSCF9999.JPG").write_bytes(b"data")

        assert main(["IMG", "-p", str(photo_dir)]) == 0
        assert (nested / "DSCF9999.JPG").exists()
        assert self._names(photo_dir / "to_delete") == {"DSCF5341.JPG"}

    def test_no_orphans(self):
        """孤立ファイルがない場合は何もしない"""
        with tempfile.TemporaryDirectory() as temp_dir:
            temp_path = Path(temp_dir)
            for name in ["A.JPG", "A.RAF"]:
                (temp_path / name).write_bytes(b"data")

            assert main(["IMG", "-p", str(temp_path)]) == 0
            assert not (temp_path / "to_delete").exists()

    def test_no_orphans_prints_summary(self, capsys):
        """孤立ファイルがない場合も完了サマリーを表示する"""
        with tempfile.TemporaryDirectory() as temp_dir:
            temp_path = Path(temp_dir)
            for name in ["A.JPG", "A.RAF"]:
                (temp_path / name).write_bytes(b"data")

            assert main(["IMG", "-p", str(temp_path)]) == 0

            out = capsys.readouterr().out
            assert "孤立ファイルは見つかりませんでした" in out
            assert "処理完了サマリー" in out
            assert "孤立ファイル数: 0" in out

    def test_no_subject_files_warns(self, capsys):
        """検査対象の拡張子のファイルが1つもない場合は警告する"""
        with tempfile.TemporaryDirectory() as temp_dir:
            temp_path = Path(temp_dir)
            for name in ["A.RAF", "B.RAF"]:
                (temp_path / name).write_bytes(b"data")

            assert main(["IMG", "-p", str(temp_path)]) == 0
            assert "警告: 検査対象のJPGファイルが見つかりません" in capsys.readouterr().out

            assert main(["RAW", "-p", str(temp_path), "-n"]) == 0
            assert "警告" not in capsys.readouterr().out

    def test_equal_extensions_rejected(self, photo_dir: Path, capsys):
        """RAW拡張子と画像拡張子が同じ場合は入力エラー"""
        before = self._names(photo_dir)

        exit_code = main(["IMG", "-p", str(photo_dir), "-r", "JPG", "-j", "jpg"])

        assert exit_code == 1
        assert "入力エラー" in capsys.readouterr().err
        assert self._names(photo_dir) == before

    @pytest.mark.parametrize("raw_ext", ["RAF.", "*.RAF", "tar.gz", "a/b"])
    def test_unmatchable_raw_extension_rejected(self, raw_ext, capsys):
        """一致し得ないRAW拡張子は入力エラーで、ペアのJPGは削除されない"""
        with tempfile.TemporaryDirectory() as temp_dir:
            temp_path = Path(temp_dir)
            for name in ["A.JPG", "A.RAF"]:
                (temp_path / name).write_bytes(b"data")

            exit_code = main(["IMG", "-p", str(temp_path), "-r", raw_ext, "--delete"])

            assert exit_code == 1
            assert "入力エラー" in capsys.readouterr().err
            assert self._names(temp_path) == {"A.JPG", "A.RAF"}

    def test_unknown_filter_rejected(self, photo_dir: Path, capsys):
        """不明なモードは入力エラー"""
        assert main(["JPG", "-p", str(photo_dir)]) == 1
        assert "入力エラー" in capsys.readouterr().err

    def test_invalid_dest_dir_rejected(self, photo_dir: Path):
        """不正な移動先サブフォルダ名は入力エラー"""
        assert main(["IMG", "-p", str(photo_dir), "--dest-dir", "../elsewhere"]) == 1

    def test_nonexistent_path(self, capsys):
        """存在しないパスは入力エラー"""
        with tempfile.TemporaryDirectory() as temp_dir:
            missing = Path(temp_dir) / "missing"
            assert main(["IMG", "-p", str(missing)]) == 1
            assert "入力エラー" in capsys.readouterr().err

    def test_empty_path_uses_current_directory(self, photo_dir: Path, monkeypatch):
        """--path省略時はカレントディレクトリ"""
        monkeypatch.chdir(photo_dir)

        assert main(["RAW"]) == 0
        assert (photo_dir / "to_delete" / "DSCF5359.RAF").exists()

    def test_verbose_writes_log_file(self, photo_dir: Path, log_file: Path):
        """詳細モードではログファイルにも出力する"""
        assert main(["IMG", "-p", str(photo_dir), "--verbose"]) == 0

        content = log_file.read_text(encoding='utf-8')
        assert "DSCF5341.JPG" in content
        assert "DEBUG" in content

    def test_no_arguments_prints_help(self, capsys):
        """引数なしの場合はヘルプを表示"""
        assert main([]) == 0
        assert "photo-tools" in capsys.readouterr().out

    def test_version(self, capsys):
        """--versionでバージョンを表示"""
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert "photo-tools" in capsys.readouterr().out

    def test_parser_defaults(self):
        """オプションのデフォルト値"""
        args = create_parser().parse_args(["IMG"])

        assert args.rawext == "RAF"
        assert args.photoext == "JPG"
        assert args.path == ""
        assert args.delete is False
        assert args.dest_dir == "to_delete"
        assert args.dry_run is False
        assert args.ignore_case is False

    def test_cleanup_manager_stats(self, photo_dir: Path):
        """CleanupManagerは処理統計を返す"""
        stats = CleanupManager().clean_orphans(
            directory=photo_dir,
            config=ExtensionConfig(subject_class=FileClass.RAW),
            mode=DispositionMode.delete()
        )

        assert stats.files_found == len(SESSION_FILES) + 1
        assert stats.raw_files_found == 4
        assert stats.developed_files_found == 4
        assert stats.other_files_found == 1
        assert stats.orphans_found == 1
        assert stats.actions_planned == 1
        assert stats.actions_succeeded == 1
        assert stats.actions_failed == 0
        assert not (photo_dir / "DSCF5359.RAF").exists()

    def test_cleanup_manager_invalid_directory(self):
        """CleanupManagerは無効なディレクトリでValidationErrorを送出"""
        with tempfile.TemporaryDirectory() as temp_dir:
            with pytest.raises(ValidationError):
                CleanupManager().clean_orphans(
                    directory=Path(temp_dir) / "missing",
                    config=ExtensionConfig()
                )
