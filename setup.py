from setuptools import find_packages, setup

setup(
    name="reporttime",
    version="0.1.0",
    description="ZSH-like REPORTTIME for bash, zsh and Python REPLs",
    packages=find_packages(include=["reporttime", "reporttime.*"]),
    python_requires=">=3.10",
    install_requires=[
        "typer<0.26",  # CLI; 0.26+ vendors click, breaking click.get_current_context()
        "click>=8.2",  # Context access for display format
        "pydantic>=2",  # Configuration and output schemas
        "rich",  # Terminal formatting
        "jinja2",  # Shell script templates
        "pyyaml",  # YAML output
        "pygments",  # Output highlighting on a TTY
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
    },
    entry_points={
        "console_scripts": [
            "reporttime=reporttime.cli:main",
        ],
    },
)
