from setuptools import find_packages, setup

setup(
    name="crysym",
    version="0.1.0",
    description="Crystallographic symmetry: lattice reduction, primitive cells and space group determination",
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "scipy",
        "spglib>=2.5",
        "trimesh",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
