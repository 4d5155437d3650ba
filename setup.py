from setuptools import setup, find_packages
import bef93


with open('readme.rst') as f:
    long_description = f.read()


setup(
    name='bef93',
    description="A Befunge-93 interpreter implemented in pure Python",
    long_description=long_description,
    version=bef93.__version__,
    packages=find_packages(exclude=["*.test.*", "test"]),
    python_requires='>=3.6',
    extras_require={
        'test': ['pytest', 'hypothesis>=6.75'],
    },
    entry_points={
        'console_scripts': [
            'bef93 = bef93.cli.run:run',
        ]
    },
    license='BSD',
    classifiers=[
        'License :: OSI Approved :: BSD License',
        'Development Status :: 3 - Alpha',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
        'Programming Language :: Python :: Implementation :: PyPy',
        'Topic :: Software Development :: Interpreters',
    ]
)
