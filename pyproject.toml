[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lietransforms"
version = "0.1.0"
description = "Lie groups for 2D and 3D rigid-body and similarity transformations: SO2, SE2, SO3, SE3, ScSO3 and Sim3"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = ["lie group", "lie algebra", "rotation", "rigid body", "similarity", "quaternion", "SLAM", "robotics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest", "numpy", "scipy"]

[tool.hatch.build.targets.wheel]
packages = ["lietransforms"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
