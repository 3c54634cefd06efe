"""Concurrency tests for independent generation runs.

Renderers and configs are immutable, so several runs can share them as
long as each run has its own CodeGenerator and destination file.
"""

from concurrent.futures import ThreadPoolExecutor, as_completed
from datetime import datetime
from pathlib import Path

from iconpacker import GenerationConfig, JavaRenderer, KotlinRenderer, generate_icon_enum

ICONS = [f"icon-{i}" for i in range(200)]


def _config(index: int) -> GenerationConfig:
    return GenerationConfig.from_dict({
        "className": f"IconSet{index}",
        "package": "com.example.icons",
        "interfaces": ["com.vaadin.flow.component.icon.IconFactory"],
        "iconNameProperty": "iconName",
        "iconSetNameProperty": {"name": "iconSetName", "override": True},
        "createFunction": {"name": "create", "override": True},
    })


class TestConcurrentRuns:
    """Parallel runs do not interfere."""

    def test_shared_renderers_across_threads(self, tmp_path: Path) -> None:
        renderers = [JavaRenderer(), KotlinRenderer()]
        clock = lambda: datetime(2024, 1, 1)  # noqa: E731

        def run(index: int) -> Path:
            return generate_icon_enum(
                _config(index),
                ICONS,
                f"set{index}",
                tmp_path,
                renderer=renderers[index % 2],
                clock=clock,
            )

        with ThreadPoolExecutor(max_workers=8) as executor:
            futures = {executor.submit(run, i): i for i in range(16)}
            paths = {futures[f]: f.result() for f in as_completed(futures)}

        assert len(paths) == 16
        for index, path in paths.items():
            out = path.read_text(encoding="utf-8")
            expected_suffix = ".java" if index % 2 == 0 else ".kt"
            assert path.name == f"IconSet{index}{expected_suffix}"
            assert out.count("ICON_") == len(ICONS)
            assert f'"set{index}"' in out
            assert out.rstrip().endswith("}")
            # Exactly one terminal member
            assert out.count('");\n') == 1

    def test_same_config_different_destinations(self, tmp_path: Path) -> None:
        config = _config(0)
        clock = lambda: datetime(2024, 1, 1)  # noqa: E731
        destinations = [tmp_path / f"dist{i}" for i in range(6)]
        for destination in destinations:
            destination.mkdir()

        with ThreadPoolExecutor(max_workers=6) as executor:
            paths = list(
                executor.map(
                    lambda d: generate_icon_enum(config, ICONS, "vaadin", d, clock=clock),
                    destinations,
                )
            )

        contents = {path.read_text(encoding="utf-8") for path in paths}
        assert len(contents) == 1
