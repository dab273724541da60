#!/usr/bin/env python

from setuptools import setup, find_packages

setup(name='bearer-challenge',
      version='1.0.0',
      description='Parse and serialise "Bearer" WWW-Authenticate challenges.',
      long_description=open("README.md").read(),
      long_description_content_type="text/markdown",
      license="MIT",
      packages=find_packages(include=['bearer_challenge', 'bearer_challenge.*']),
      python_requires=">=3.7",
      install_requires=[
          'markdown >= 3.0',
          'markupsafe >= 2.0'
      ],
      extras_require={
          'dev': [
          'mypy',
          'pytest'
          ]
      },
      classifiers=[
        'Programming Language :: Python :: 3',
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Topic :: Internet :: WWW/HTTP',
        'License :: OSI Approved :: MIT License',
      ],
)
