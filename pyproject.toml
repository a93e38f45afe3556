[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "patternkit"
version = "0.1.0"
description = "Small, runnable examples of creational and structural design patterns built around games and gadgets."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "design-patterns",
    "abstract-factory",
    "builder",
    "factory-method",
    "prototype",
    "singleton",
    "adapter",
    "bridge",
    "lru-cache",
    "lfu-cache",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
patternkit-game-objects = "patternkit.game_objects:main"
patternkit-characters = "patternkit.characters:main"
patternkit-alerts = "patternkit.alerts:main"
patternkit-leaderboard = "patternkit.leaderboard:main"
patternkit-caches = "patternkit.caches:main"
patternkit-signals = "patternkit.signals:main"
patternkit-smart-home = "patternkit.smart_home:main"

[tool.hatch.build.targets.wheel]
packages = ["patternkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
