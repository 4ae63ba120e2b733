from setuptools import setup, find_packages

setup(
    name='minisgd',
    author='Kristián Kuľka',
    description='Minimalistic pure Python library for training regression and classification models with stochastic '
                'gradient descent, keeping models, cost functions and teachers independent of each other.',
    version='0.1.0',
    packages=find_packages(exclude=['tests', 'tests.*']),
    python_requires='>=3.9',
    extras_require={
        'test': ['numpy', 'torch'],
    },
)
