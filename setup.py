from setuptools import setup, find_packages

setup(
    name="last_interview",
    version="0.1.0",
    packages=find_packages(include=["last_interview", "last_interview.*"]),
    package_data={
        "last_interview": [
            "content/*.yaml",
        ]
    },
    install_requires=[
        'rich>=13.0',
        'typer>=0.9,<0.20',
        'pydantic>=2.0',
        'pyyaml>=6.0',
        'python-dotenv>=1.0',
    ],
    extras_require={
        'dev': [
            'yapf==0.40.2',
            'isort==5.13.2',
            'pytest==8.1.1',
            'pre-commit==3.6.2'
        ]
    },
    entry_points={
        "console_scripts": [
            "last-interview=last_interview.executors.cli.commands:app",
        ]
    }
)
