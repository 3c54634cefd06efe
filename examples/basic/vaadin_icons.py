"""Generate a Java icon enum from a handful of icon names."""

import tempfile

from iconpacker import GenerationConfig, generate_icon_enum

config = GenerationConfig.from_dict({
    "className": "VaadinIcon",
    "package": "com.example.icons",
    "interfaces": ["com.vaadin.flow.component.icon.IconFactory"],
    "iconNameProperty": {"name": "iconName"},
    "iconSetNameProperty": {"name": "iconSetName", "override": True},
    "createFunction": {"name": "create", "override": True},
})

with tempfile.TemporaryDirectory() as dist:
    path = generate_icon_enum(config, ["3d-rotate", "alarm", "arrow-up"], "vaadin", dist)
    print(path.read_text(encoding="utf-8"))
