from setuptools import setup, find_packages

setup(
    name="gridline",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*", "gridline.tests", "gridline.tests.*"]),
    package_data={"gridline": ["configs/*.yaml"]},
    install_requires=[
        "numpy",
        "PyYAML",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "gridline-trace=tools.line_trace:main",
        ]
    },
)
