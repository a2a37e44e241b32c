from setuptools import setup, find_packages

setup(
    name='flashdeck',
    version='0.1',
    package_dir={'': 'src'},
    packages=find_packages(where='src'),
    install_requires=[
        'click',
        'rich',
        'PyYAML',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'flashdeck=flashdeck.cli:main',
        ],
    },
    author='flashdeck contributors',
    description='Terminal flashcard trainer with miss tracking and plain-text decks',
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
    ],
    python_requires='>=3.9',
)
