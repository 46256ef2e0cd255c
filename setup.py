# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="jucer2cmake",
    version="0.1.0",
    description="Translate JUCE Projucer (.jucer) projects into CMakeLists.txt scripts",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["jucer2cmake*"]),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'jucer2cmake=jucer2cmake.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
