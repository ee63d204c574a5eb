from setuptools import find_packages, setup

if __name__ == "__main__":
    setup(
        name="picosign",
        version="0.1.0",
        description="Picosign Bitcoin signed-message utilities",
        packages=find_packages(where="src"),
        package_dir={"": "src"},
        python_requires=">=3.9",
        install_requires=[
            "base58check>=1.0.2",
            "pycryptodome>=3.10",
        ],
        extras_require={
            "test": ["pytest>=7"],
        },
    )
