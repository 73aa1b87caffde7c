from glob import glob
from setuptools import setup


setup(
    name='srpn',
    version='1.0.0',
    description='Saturating 32-bit RPN calculator',
    install_requires=[
        'regex',
        'prompt_toolkit',
    ],
    packages=['srpn'],
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
            'coverage',
            'flake8',
        ],
    },
    scripts=glob('bin/*'),
    license='ISC',
)
