"""
globbench setup.py

globbenchパッケージのインストール設定
"""

from setuptools import setup, find_packages

# READMEファイルを読み込み


def read_readme():
    with open('README.md', 'r', encoding='utf-8') as f:
        return f.read()

# requirements.txtを読み込み


def read_requirements():
    with open('requirements.txt', 'r', encoding='utf-8') as f:
        return [line.strip() for line in f.readlines()
                if line.strip() and not line.startswith('#')]


setup(
    name='globbench',
    version='0.1.0',
    author='globbench developers',
    author_email='globbench@example.com',
    description='Times filesystem glob lookups against a fixed set of patterns.',
    long_description=read_readme(),
    long_description_content_type='text/markdown',
    url='https://github.com/globbench/globbench',
    packages=find_packages(include=['globbench', 'globbench.*']),
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Topic :: Software Development :: Testing',
        'Topic :: System :: Benchmark',
    ],
    keywords='glob, benchmark, filesystem',
    python_requires='>=3.9',
    install_requires=read_requirements(),
    extras_require={
        'dev': [
            'pytest>=6.0.0',
            'flake8>=3.8.0',
            'black>=21.0.0',
            'isort>=5.8.0',
            'pydocstyle>=6.0.0',
            'pre-commit>=2.12.0'
        ]
    },
    entry_points={
        'console_scripts': [
            'globbench=globbench.cli.bench:main',
        ],
    },
    include_package_data=True,
    zip_safe=False,
)
