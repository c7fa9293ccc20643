# setup.py
from setuptools import setup, find_packages

setup(
    name="objmesh",
    version="1.0.0",
    description="Wavefront OBJ/MTL loader producing indexed, per-material meshes",
    packages=find_packages(include=["objmesh", "objmesh.*"]),
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.20.0",
        "Pillow>=9.1.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
