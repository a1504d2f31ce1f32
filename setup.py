#!/usr/bin/env python
from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(name='gpexplorer',
      version='0.1.0',
      author='Emmanuel Vazquez',
      author_email='emmanuel.vazquez@centralesupelec.fr',
      description='gpexplorer: exact Gaussian process regression over scalar inputs, with an interactive explorer',
      long_description=long_description,
      long_description_content_type="text/markdown",
      classifiers=[
          "Programming Language :: Python :: 3",
          "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
          "Operating System :: OS Independent",
      ],
      packages=find_packages(include=['gpexplorer', 'gpexplorer.*']),
      license='LICENSE.txt',
      install_requires=[
             "numpy",
             "scipy>=1.8.0",
             "matplotlib"
         ],
      extras_require={
          "torch": ["torch"],
          "test": ["pytest"],
      },
      entry_points={
          "gui_scripts": ["gpexplorer=gpexplorer.plot.explorer:main"],
      },
      python_requires=">=3.8",
      )
