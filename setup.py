"""Package build script"""
import setuptools

# Pull package version number from the VERSION file
with open('VERSION', 'r', encoding='utf-8') as f:
    __version__ = f.read().strip()

if not __version__:
    raise EnvironmentError('Could not find valid version number in VERSION; aborting setup')

with open("./README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setuptools.setup(
    name="georadar",
    version=__version__,
    author="",
    author_email="",
    description="Geodesy and radar refraction: earth models, local frames and "
                "sensor-to-target conversions over an effective earth.",
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=setuptools.find_packages(
        include=('georadar*', ),
        exclude=('*tests', 'tests*')
    ),
    package_data={"georadar": ["py.typed"]},
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent"
    ],
    python_requires='>=3.9',
    install_requires=[
        'numpy>=1.20',
        'pydantic>=2,<3',
        'typing_extensions>=4.0',
    ],
    extras_require={
        'test': [
            'geographiclib>=2.0',
            'pytest',
        ],
    },
)
