"""Package build script"""
import pathlib
import re
import setuptools

HERE = pathlib.Path(__file__).parent
ver_file = HERE / 'VERSION'

# Pull package version number from VERSION
__version__ = ver_file.read_text(encoding='utf-8').strip()
if not re.match(r'^\d+\.\d+\.\d+(?:\.[a-zA-Z0-9]+)?$', __version__):
    raise EnvironmentError(f'Could not find valid version number in {ver_file}; aborting setup')

with open(HERE / "README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setuptools.setup(
    name="geodatum",
    version=__version__,
    author="",
    author_email="",
    description="Ellipsoidal and spherical geodesy with datum conversion via Helmert transforms.",
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=setuptools.find_packages(
        include=('geodatum*', ),
        exclude=('*tests', 'tests*')
    ),
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent"
    ],
    python_requires='>=3.8',
    install_requires=[
        'numpy>=1.20',
        'pydantic>=2,<3',
    ],
    extras_require={
        'karney': ['geographiclib>=2.0'],
        'test': ['pytest', 'geographiclib>=2.0'],
    },
)
