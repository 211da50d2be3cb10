from fluentfp.conf import (Configuration, configure)
from fluentfp.exceptions import (InvalidUnwrap)
from fluentfp.optional import (Optional)
from fluentfp.result import (Result)

__all__ = (
    'Configuration',
    'InvalidUnwrap',
    'Optional',
    'Result',
    'configure',
)
