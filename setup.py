from setuptools import setup, find_packages

setup(
    name="jmat",
    version="1.0",
    description="Reduced row echelon form, determinant, cofactors and adjoint of real matrices",
    long_description=("Small linear algebra toolkit that derives the reduced row echelon form, determinant, "
                      "cofactor matrix, adjoint and transpose of a real matrix, with an interactive console front end"),
    long_description_content_type="text/plain",
    license="Apache License 2.0",
    python_requires=">=3.7",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=["numpy"],
    extras_require={
        "test": ["pytest", "scipy", "sympy"],
    },
    entry_points={
        "console_scripts": ["jmat=jmat.cli:start_from_command_line"],
    },
    classifiers=[
        "Intended Audience :: Education", "Intended Audience :: Science/Research", "Development Status :: 3 - Alpha",
        "Programming Language :: Python :: 3.9", "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11", "Programming Language :: Python :: 3.12", "Natural Language :: English",
        "Operating System :: OS Independent", "Topic :: Scientific/Engineering :: Mathematics"
    ],
    keywords=["linear algebra", "matrix", "row echelon form", "determinant", "adjoint"],
    zip_safe=False,
)
