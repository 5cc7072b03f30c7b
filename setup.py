import setuptools

setuptools.setup(
    name = 'inkcurve',
    version = '1.0',
    description = 'smooth Bezier curves for freehand ink strokes',
    packages = setuptools.find_packages(exclude=['tests']),
    install_requires=['numpy', 'scipy'],
    extras_require={'test': ['pytest']},
    python_requires='>=3.6',
)
