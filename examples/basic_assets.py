from pathlib import Path

from fingerling import (
    CSSBundleStep,
    ImageFingerprintStep,
    InputBuildSettings,
    JSBundleStep,
)


# Optional, and can be overridden with CLI arguments.
SETTINGS = InputBuildSettings(
    input_dir=Path(__file__).parent / 'basic_assets',
    output_dir=Path('output/basic_assets'),
)
STEPS = [
    # Copy images with fingerprinted names, keeping their folders.
    ImageFingerprintStep('img'),
    # Bundle everything under js/ into /js/assets-<md5>.js...
    JSBundleStep('js', '/js/assets'),
    # ...and everything under css/ into /css/assets-<md5>.css.
    CSSBundleStep('css', '/css/assets'),
]
