from setuptools import find_packages
from setuptools import setup

setup(
    author='Jeffrey Finkelstein',
    author_email='jeffrey.finkelstein@gmail.com',
    #classifiers=[],
    description='A naive Bayes text classifier over any number of categories',
    #download_url='',
    install_requires=['blinker'],
    extras_require={'test': ['pytest']},
    #include_package_data=True,
    #keywords=[],
    #license='',
    #long_description='',
    name='nbclassifier',
    platforms='any',
    packages=find_packages(exclude=['tests']),
    url='http://github.com/jfinkels/nbclassifier',
    version='0.0.1.dev0',
    #zip_safe=False
)
