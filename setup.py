from setuptools import setup, find_packages

setup(name='linkmath',
      version='1.0.0',
      description='Vector, quaternion, and scalar interpolation kernel for animation and motion code',
      packages=find_packages(include=['linkmath', 'linkmath.*']),
      python_requires='>=3.11',
      install_requires=['numpy'],
      extras_require={'test': ['pytest', 'scipy']})
