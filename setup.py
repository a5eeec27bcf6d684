from setuptools import setup, find_packages


# Read README for long description
def read_readme():
    try:
        with open("README.md", "r", encoding="utf-8") as f:
            return f.read()
    except FileNotFoundError:
        return "Backtracking parser, printer and evaluator for infix expression trees"


setup(
    name="expression-trees",
    version="0.1.0",
    description="Backtracking parser, printer and evaluator for infix expression trees",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
    packages=find_packages(include=["exptree", "exptree.*"]),
    py_modules=["main"],
    include_package_data=True,
    python_requires=">=3.8",
    install_requires=[
        "pandas>=1.0.0",
        "numpy>=1.18.0",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0",
            "pytest-cov",
            "hypothesis",
            "black",
            "flake8",
        ],
    },
    entry_points={
        "console_scripts": [
            "exptree=main:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Compilers",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    keywords="parser, expression tree, recursive descent, backtracking, evaluator",
)
