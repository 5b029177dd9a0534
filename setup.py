from pathlib import Path

from setuptools import setup

root_dir = Path(__file__).parent
with open(root_dir / "README.md") as f:
    readme = f.read()

extras_require = {
    "dev": [
        "pytest",
        "pytest-benchmark",
        "nox",
        "ruff",
        "mypy",
        "Pillow",
        "atheris; python_version < '3.12'",
    ],
    "image": ["Pillow"],
}

setup(
    name="tgadecoder",
    version="1.0.0",
    packages=["tgadecoder"],
    package_data={"tgadecoder": ["py.typed"]},
    install_requires=[
        "charset-normalizer >= 2.0.0",
    ],
    extras_require=extras_require,
    description="Truevision TGA image decoder",
    long_description=readme,
    long_description_content_type="text/markdown",
    license="MIT",
    scripts=[
        "tools/tgainfo.py",
        "tools/tga2png.py",
    ],
    keywords=[
        "tga",
        "targa",
        "truevision",
        "image decoder",
        "run-length encoding",
    ],
    python_requires=">=3.10",
    classifiers=[
        "Programming Language :: Python",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Programming Language :: Python :: 3 :: Only",
        "Development Status :: 5 - Production/Stable",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Topic :: Multimedia :: Graphics :: Graphics Conversion",
    ],
)
