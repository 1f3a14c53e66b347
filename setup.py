from setuptools import setup, find_packages

setup(
    name="critical-css",
    version="1.0.0",
    packages=find_packages(),
    install_requires=[
        'csscompressor',
        'psutil',
        'aiofiles',
        'orjson',
        'typing-extensions',
        'playwright',
        'validators',
        'tqdm'
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
            'cssutils'
        ]
    },
    entry_points={
        'console_scripts': [
            'critical-css=critical_css.cli:main',
        ],
    },
    python_requires='>=3.8',
    description="Critical path CSS generator: keeps the stylesheet rules used above the fold",
    long_description=open('README.md').read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
