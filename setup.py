from setuptools import setup


setup(name='nbodyips',
      version='0.1.0',
      description='Permutation invariant N-body polynomial interatomic '
                  'potentials',
      packages=['nbodyips',
                'nbodyips.invariants',
                'nbodyips.polys'],
      install_requires=['numpy',
                        'scipy',
                        'ase',
                        'coloredlogs'],
      extras_require={'test': ['pytest']},
      python_requires='>=3.8',
      license='MIT',
      author='nbodyips authors')
