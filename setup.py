from setuptools import setup, find_packages

setup(
    name='directory_map',
    python_requires='>=3.9',
    description = "Treat the regular files of a directory as a key/value store of their contents",
    long_description="This Python module maps the regular files of a single directory to a simple key/value interface: get reads a file, set writes it, delete removes it and hands back what it held, keys lists the directory and clear empties it of regular files.  Every mutation is gated by an access mode (ReadOnly, Create, Overwrite or ClearDir) chosen when the map is created.",
    version='0.1.0',
    package_dir={'': 'src'},  # This tells setuptools where to find packages
    packages=find_packages(where='src'),
    install_requires=[],
    extras_require={
        'test': [
            'pytest',
            'python-dotenv',
        ]
    },
    classifiers = [
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: POSIX",
        "Intended Audience :: Developers",
        "Topic :: System :: Filesystems"
    ]

)
