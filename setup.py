from setuptools import setup, find_packages

setup(
    name='scadforge',
    version='0.1.0',
    author='nassimberrada',
    author_email='your.email@example.com',
    description='A Python library for building OpenSCAD scripts from a composable 2D/3D shape algebra.',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    url='https://github.com/yourusername/scadforge',
    packages=find_packages(exclude=['tests', 'examples']),
    include_package_data=True,
    install_requires=[
        'numpy>=2.0',
    ],
    extras_require={
        'test': [
            'pytest',
        ]
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Topic :: Multimedia :: Graphics :: 3D Modeling',
        'Topic :: Scientific/Engineering :: Visualization',
    ],
    python_requires='>=3.8',
)
