import setuptools

with open("README.md", "r") as file:
    readme = file.read()

setuptools.setup(
    name="isquanta",
    version="0.1.0",
    description="Ionization electrons and scintillation photons from energy deposits "
    "in liquid noble detectors",
    author="isquanta contributors",
    long_description=readme,
    long_description_content_type="text/markdown",
    python_requires=">=3.9",
    install_requires=[
        "numpy",
        "numba",
        "scipy",
        "strax",
        "straxen",
        "immutabledict",
    ],
    extras_require={
        "test": ["pytest"],
    },
    packages=setuptools.find_packages(include=["isquanta", "isquanta.*"]),
    classifiers=[
        "Natural Language :: English",
        "Programming Language :: Python :: 3",
        "Intended Audience :: Science/Research",
        "Programming Language :: Python :: Implementation :: CPython",
        "Topic :: Scientific/Engineering :: Physics",
    ],
    zip_safe=False,
)
