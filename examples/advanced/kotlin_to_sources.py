"""Stream icon names into a Kotlin enum, then copy it into a source tree."""

import tempfile
from pathlib import Path

from iconpacker import CodeGenerator, GenerationConfig

config = GenerationConfig.from_dict({
    "className": "LumoIcon",
    "package": "com.example.icons",
    "iconNameProperty": {"name": "iconName", "override": True},
    "iconSetNameProperty": {"name": "iconSetName", "override": True},
})

icons = ["align-center", "align-left", "arrow-down", "7-days"]

with tempfile.TemporaryDirectory() as workdir:
    dist = Path(workdir) / "dist"
    dist.mkdir()

    gen = CodeGenerator("kotlin")
    gen.start(config, dist)
    for i, icon in enumerate(icons):
        gen.write_icon(icon, last=i == len(icons) - 1)
    gen.end(config, "lumo")

    target = gen.copy_to_sources(dist, Path(workdir) / "src/main/kotlin", config.package, config.class_name)
    print(target.relative_to(workdir))
    print(target.read_text(encoding="utf-8"))
