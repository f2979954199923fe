from setuptools import setup

setup(
    name='triplex',
    version='0.1.0',
    packages=['triplex'],
    # Conform to PEP-561
    package_data={
        'triplex': ['py.typed']
    },
    python_requires='>=3.8',
    extras_require={
        'test': ['pytest'],
    },
    url='',
    license='MIT',
    author='triplex developers',
    author_email='',
    description='Composable schemas that encode, decode, and validate data for serialization.'
)
