import setuptools

setuptools.setup(
    name='utc-timestamp',
    version='0.1',
    author='XuZhen86',
    packages=setuptools.find_namespace_packages(include=['utc_timestamp', 'utc_timestamp.*']),
    python_requires='>=3.11,<4',
    install_requires=[
        'absl-py>=2.1.0,<3',
    ],
    extras_require={
        'test': [
            'pytest>=8.0.0,<9',
        ],
    },
    entry_points={
        'console_scripts': [
            'utc-timestamp = utc_timestamp.main:app_run_main',
        ],
    },
)
