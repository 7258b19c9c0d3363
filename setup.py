from setuptools import find_packages, setup


setup(
    name="layerforge",
    version="0.1.0",
    description="PCB layer assembly and Gerber (RS-274X) layer file writer",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=[
        "pcb-tools==0.1.6",
        "numpy",
        "shapely==2.1.2",
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.10",
    entry_points={
        "console_scripts": [
            "layerforge=layerforge.cli:main",
        ]
    },
)
