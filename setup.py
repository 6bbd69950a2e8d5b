from __future__ import annotations

from setuptools import find_packages, setup


setup(
    name="forestgraph",
    version="0.1.0",
    description="Adjacency-matrix graphs, disjoint-set forests, Kruskal MST and connected components",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=["numpy>=1.21"],
    extras_require={"test": ["pytest>=7"]},
)
