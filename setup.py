"""
Setup configuration for Slime package.
"""

from setuptools import setup, find_packages

setup(
    name="slime-editor",
    version="0.1.0",
    description="Terminal Text Editor with a grapheme-aware line buffer",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "grapheme>=0.6.0",
        "pygments>=2.19.1",
        "windows-curses>=2.4.1; platform_system == 'Windows'",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
        ],
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "slime=slime.__main__:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Environment :: Console :: Curses",
        "Intended Audience :: Developers",
        "Operating System :: POSIX :: Linux",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Text Editors",
        "Topic :: Utilities",
    ],
)
