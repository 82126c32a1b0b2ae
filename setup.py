from pathlib import Path

import setuptools


def load_requirements(filename: str) -> list[str]:
    requirements = []
    for line in Path(__file__).with_name(filename).read_text(encoding="utf-8").splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        requirements.append(stripped)
    return requirements


setuptools.setup(
    name="tcg_draw_calc",
    version="0.1",
    description="Draw probability calculator for trading card game decks",
    packages=["services", "utils", "utils.constants", "widgets"],
    py_modules=["main"],
    classifiers=["Programming Language :: Python :: 3"],
    python_requires=">=3.11",
    install_requires=load_requirements("requirements.txt"),
    extras_require={"test": ["pytest>=7"]},
    entry_points={"gui_scripts": ["tcg-draw-calc = main:main"]},
)
