from setuptools import setup, find_packages

with open('README.md', 'r', encoding='utf-8') as f:
    long_description = f.read()

setup(
    name='asset-registry',
    version='0.1.0',
    packages=find_packages(where='src'),
    package_dir={'': 'src'},
    include_package_data=True,
    install_requires=[
        'pydantic>=2.7',
        'pydantic-settings>=2.3',
        'loguru>=0.7',
        'prometheus-client>=0.20',
    ],
    extras_require={
        'test': [
            'pytest>=8.0',
            'pytest-asyncio>=0.23',
            'pytest-mock>=3.12',
        ],
    },
    author='Yuan ',
    author_email='tommot20077@gmail.com',
    description='Async client for the asset-registration smart contract read-only functions.',
    long_description=long_description,
    long_description_content_type='text/markdown',
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Framework :: AsyncIO',
        'Topic :: Software Development :: Libraries :: Python Modules',
    ],
    python_requires='>=3.11',
)
