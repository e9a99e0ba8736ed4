from setuptools import setup, find_packages
setup(
    name='apiwire',
    version='0.1.0',
    package_dir={'': 'src'},
    packages=find_packages(where='src'),
    include_package_data=True,
    package_data={
        'apiwire': [
            'http/*.yaml',
            'config/*.ini',
        ],
    },
    description='HTTP request layer with interchangeable backends for REST API clients.',
    author='Your Name',
    author_email='youremail@example.com',
    python_requires='>=3.9',
    install_requires=[
        'pyyaml>=6.0',
        'requests>=2.25.0',
        'httpx>=0.24.0',
        'pydantic>=2.0.0',
    ],
    extras_require={
        'test': [
            'pytest>=7.0.0',
        ],
    },
)
