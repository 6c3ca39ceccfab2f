from setuptools import setup, find_packages
setup(
    name="textsim",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.10",
    install_requires=[
        "click>=8.1.7",
        "python-dotenv>=1.0.1",
        "pydantic>=2.8.2",
        "pydantic-settings>=2.0.0",
        "httpx>=0.27",
    ],
    extras_require={
        "local": ["sentence-transformers"],
        "test": ["pytest>=8"],
    },
    entry_points={
        "console_scripts": ["textsim=text_similarity.cli:main"],
    },
)
