from setuptools import setup

trove_classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: Implementation :: CPython",
    "Topic :: Security :: Cryptography",
    "Topic :: Software Development :: Testing",
    "Topic :: Utilities",
    ]

setup(name="hkdfcheck",
      version="0.1.0",
      description="Check HKDF implementations against the Wycheproof test vectors",
      long_description=open('README.md').read(),
      long_description_content_type='text/markdown',
      license="MIT",
      classifiers=trove_classifiers,
      python_requires=">=3.10",

      package_dir={"": "src"},
      packages=["hkdfcheck",
                "hkdfcheck.cli",
                "hkdfcheck.test",
                ],
      entry_points={
          "console_scripts":
          [
              "hkdfcheck = hkdfcheck.cli.cli:hkdfcheck",
          ]
      },
      install_requires=[
          "attrs >= 22.2.0", # 22.2.0 adds the "attrs" namespace with frozen/field
          "twisted",
          "zope.interface",
          "cryptography",
          "hkdf",
          "click",
      ],
      extras_require={
          "dev": [
              "tox",
              "pyflakes",
              "pytest",
              "pytest_twisted",
              "hypothesis",
          ],
      },
      test_suite="hkdfcheck.test",
      )
