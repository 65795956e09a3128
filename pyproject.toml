[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xdogflow"
version = "0.1.0"
description = "Flow-guided image stylization building blocks: vector math, typed images, structure tensors, streamline tracing and XDoG parameters"
requires-python = ">=3.10"
dependencies = [
    "numpy",
    "pillow",
]
keywords = [
    "image-processing",
    "stylization",
    "difference-of-gaussians",
    "xdog",
    "structure-tensor",
    "streamline",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Scientific/Engineering :: Image Processing",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["xdogflow"]

[tool.pytest.ini_options]
addopts = "-ra"
