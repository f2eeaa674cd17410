"""End-to-end tests: items file -> CLI -> selection report."""
from __future__ import annotations

import json
from pathlib import Path

from ContentSelection.cli import main
from ContentSelection.pipeline.artifacts import SelectionReport, load_items
from ContentSelection.pipeline.run import run


def _slugs(items) -> list[str]:
    return [i["slug"] for i in items]


class TestRunOnFixture:
    def test_banner_carousel(self, sample_items) -> None:
        # legacy-banner overwrites welcome at order-0
        result = run(sample_items, {"postTags": "banner", "ordered": True})
        assert _slugs(result) == ["legacy-banner", "spring-sale"]

    def test_strict_store_features(self, sample_items) -> None:
        result = run(
            sample_items,
            {"acceptTags": ["store", "featured"], "strict": True},
        )
        assert _slugs(result) == ["new-arrivals", "gift-cards"]

    def test_capped_ordered_home(self, sample_items) -> None:
        result = run(
            sample_items,
            {"acceptTags": ["home", "store"], "maxCount": 3, "ordered": True},
        )
        assert _slugs(result) == ["welcome", "spring-sale", "new-arrivals"]

    def test_input_untouched(self, sample_items_path: Path) -> None:
        items = load_items(sample_items_path)
        before = json.dumps(items, sort_keys=True)
        run(items, {"maxCount": 2, "ordered": True})
        assert json.dumps(items, sort_keys=True) == before


class TestCliEndToEnd:
    def test_select_writes_report(
        self, sample_items_path: Path, settings_file, tmp_path: Path
    ) -> None:
        settings = settings_file({"maxPosts": 2, "postTags": ["store"]})
        output = tmp_path / "report.json"

        rc = main([
            "select", "--items", str(sample_items_path),
            "--settings", str(settings),
            "--output", str(output),
        ])

        assert rc == 0
        report = SelectionReport.from_json(output)
        assert report.total_items == 8
        assert report.selected_items == 2
        assert _slugs(report.items) == ["spring-sale", "new-arrivals"]

    def test_select_singular(self, sample_items_path: Path, tmp_path: Path) -> None:
        output = tmp_path / "post.json"

        rc = main([
            "select", "--items", str(sample_items_path),
            "--accept-tags", "store", "--ordered", "--singular",
            "--output", str(output),
        ])

        assert rc == 0
        assert json.loads(output.read_text())["slug"] == "spring-sale"

    def test_select_singular_none(self, sample_items_path: Path, tmp_path: Path) -> None:
        output = tmp_path / "post.json"

        rc = main([
            "select", "--items", str(sample_items_path),
            "--accept-tags", "missing", "--singular",
            "--output", str(output),
        ])

        assert rc == 0
        assert json.loads(output.read_text()) is None

    def test_select_stdout(self, sample_items_path: Path, capsys) -> None:
        rc = main([
            "select", "--items", str(sample_items_path),
            "--max-count", "1",
        ])

        assert rc == 0
        printed = json.loads(capsys.readouterr().out)
        assert _slugs(printed) == ["spring-sale"]

    def test_invalid_settings_exit_code(
        self, sample_items_path: Path, settings_file
    ) -> None:
        settings = settings_file({"maxCount": -3})
        rc = main([
            "select", "--items", str(sample_items_path),
            "--settings", str(settings),
        ])
        assert rc == 2
