#!/usr/bin/env python

from setuptools import setup

setup(name='gnucash-ledger',
      version='1.1',
      description="Account registers and exact balances from GNU Cash files",
      long_description=open("README.md").read(),
      long_description_content_type="text/markdown",
      author="Jorgen Schaefer",
      author_email="forcer@forcix.cx",
      url="https://github.com/jorgenschaefer/gnucashxml",
      packages=['gnucashledger'],
      python_requires=">=3.8",
      install_requires=[
          "python-dateutil",
          "click>=8.0",
          ],
      extras_require={
          "tests": ["pytest"],
          },
      entry_points={
          "console_scripts": [
              "gnucash-ledger = gnucashledger.cli:main",
              ],
          },
      classifiers=[
          "Development Status :: 5 - Production/Stable",
          "Intended Audience :: Developers",
          ("License :: OSI Approved :: "
           "GNU General Public License v3 or later (GPLv3+)"),
          "Programming Language :: Python :: 3",
          "Topic :: Office/Business :: Financial :: Accounting",
          ],
      license="GPL",
      )
