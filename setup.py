from setuptools import setup, find_namespace_packages

setup(
    name="scanner-registration",
    version="0.1.0",
    packages=find_namespace_packages(include=["packages", "packages.*"]),
    package_dir={"": "."},
    py_modules=["Registration_bring_up"],
    install_requires=[
        "numpy>=1.24.0",
        "pandas>=1.5.0",
        "matplotlib>=3.6.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "scanner-registration=Registration_bring_up:main",
        ],
    },
    python_requires=">=3.8",
)
