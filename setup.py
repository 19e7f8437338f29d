from setuptools import setup, find_packages

setup(
   name='hidreport',
   version='0.1',
   description='decoder and annotated listing for USB HID report descriptors',
   author='',
   author_email='',
   packages=find_packages(include=['hidreport', 'hidreport.*']),
   install_requires=['pyusb', 'prompt-toolkit'], #external packages as dependencies
   extras_require={
      'test': ['pytest'],
   },
   entry_points={
      'console_scripts': ['hidreport = hidreport.cli:main'],
   },
   scripts=['hid-descriptor-dump.py'],
)
