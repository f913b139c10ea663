# setup.py
from setuptools import find_namespace_packages, setup

setup(
    name="draca",
    version="0.3.0",
    description="Draca: a small namespaced Lisp with a tree-walking interpreter",
    packages=find_namespace_packages(include=["draca", "draca.*"]),
    package_data={"draca": ["stdlib/*.dr"]},
    python_requires=">=3.10",
    install_requires=["numpy"],
    extras_require={"test": ["pytest", "hypothesis"]},
    entry_points={"console_scripts": ["draca=draca.repl:main"]},
    zip_safe=False,
)
