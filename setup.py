from setuptools import setup, find_packages

setup(
    name="unlimited-timeout",
    version="0.1.0",
    description="set_timeout/set_interval without the 24.8 day delay limit",
    packages=find_packages(include=["unlimited_timeout", "unlimited_timeout.*"]),
    python_requires=">=3.9",
    extras_require={"test": ["pytest"]},
)
