import os
import re

from setuptools import setup, find_packages


app_path = os.path.dirname(os.path.realpath(__file__))


def read(*names):
    with open(os.path.join(app_path, *names)) as f:
        return f.read()


def version():
    '''Read the version without importing planar (numpy may be missing)'''
    return re.search(r'__version__ = "(.*)"',
                     read('planar', '__init__.py')).group(1)


setup(
    name="planar",
    version=version(),
    packages=find_packages(exclude=['planar.tests', 'planar.tests.*']),
    author="realitix",
    author_email="realitix@gmail.com",
    description="Planar: plane geometry for real-time 3D",
    long_description=read("README.md"),
    long_description_content_type="text/markdown",
    install_requires=['docopt', 'numpy'],
    extras_require={'test': ['pytest']},
    python_requires='>=3.6',
    include_package_data=True,
    entry_points={
        'console_scripts': ['planar = planar.cli:main']
    },
    url="http://github.com/realitix/planar",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Natural Language :: English",
        "Programming Language :: Python :: 3",
        'Programming Language :: Python :: Implementation :: CPython',
        "Topic :: Multimedia :: Graphics :: 3D Rendering"
    ],
    license="Apache 2.0"
)
