from codecs import open
from os import path

from setuptools import setup, find_packages

__version__ = '0.1.0'

here = path.abspath(path.dirname(__file__))
# Get the long description from README.md
with open(path.join(here, 'README.md'), encoding='utf-8') as f:
    long_description = f.read()

# get the dependencies and installs
with open(path.join(here, 'requirements.txt'), encoding='utf-8') as f:
    reqs = [line.strip() for line in f if line.strip() and not line.startswith('#')]

setup(
    name='slopeone',
    version=__version__,
    author='',
    author_email='',
    license='Apache License',
    packages=find_packages(exclude=['tests', 'tests.*']),
    package_data={'slopeone': ['config/*.yml']},
    include_package_data=True,
    platforms=['all'],
    description='Slope One rating predictors with baseline fallback',
    long_description=long_description,
    long_description_content_type='text/markdown',
    keywords='recommender collaborative filtering slope one rating prediction',
    python_requires='>=3.10',
    install_requires=reqs,
    extras_require={
        'test': ['pytest>=7.0'],
    },

    classifiers=[
        'Development Status :: 4 - Beta',
        'Operating System :: OS Independent',
        'Intended Audience :: Developers',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Topic :: Software Development :: Libraries'
    ]
)
