from setuptools import setup

setup(
    name='idgen',
    version='0.1',
    author='Lars-Dominik Braun',
    author_email='ldb@leibniz-psychology.org',
    packages=['idgen'],
    package_data={'idgen': ['data/words.txt']},
    description='Short, optionally deterministic identifiers: proquints, NanoIDs and words',
    long_description=open('README.rst').read(),
    long_description_content_type='text/x-rst',
    install_requires=[
        'pyyaml',
        'pytz',
        'importlib_resources',
        'nanoid',
    ],
    extras_require={
        'test': ['pytest'],
    },
    python_requires='>=3.7',
    entry_points={
    'console_scripts': [
            'idgen = idgen.cli:main',
            ],
    },
    classifiers = [
        'License :: OSI Approved :: MIT License',
        'Development Status :: 4 - Beta',
        'Programming Language :: Python :: 3',
        ],
)
