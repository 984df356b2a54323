"""Uses setuptools to install the pytickanim module"""
import setuptools
import os

setuptools.setup(
    name='pytickanim',
    version='0.0.1',
    description='Tick-driven eased animation values',
    license='CC0',
    keywords='pytickanim animations easing tween',
    packages=['pytickanim'],
    long_description=open(
        os.path.join(os.path.dirname(__file__), 'README.md')).read(),
    long_description_content_type='text/markdown',
    install_requires=['pytypeutils', 'pytweening'],
    extras_require={
        'examples': ['Pillow'],
        'test': ['pytest'],
    },
    classifiers=(
        'Programming Language :: Python :: 3',
        'License :: CC0 1.0 Universal (CC0 1.0) Public Domain Dedication',
        'Topic :: Utilities'),
    python_requires='>=3.6',
)
