############################################
# imports
############################################

import inspect
import logging
from argparse import ArgumentParser, RawDescriptionHelpFormatter

############################################
# Utils functions
############################################


def base_parser():
    parser = ArgumentParser(
        prog="Cleavage Oligo Designer",
        usage="cleavage_oligo_designer [options]",
        description=__doc__,
        formatter_class=RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-c",
        "--config",
        help="Path to the config file in yaml format, str",
        default=None,
        type=str,
        metavar="",
    )
    args = parser.parse_args()
    return vars(args)


def log_parameters(func, args, kwargs):
    sig = inspect.signature(func)
    bound_args = sig.bind(*args, **kwargs)
    bound_args.apply_defaults()

    logging.info("Function: %s", func.__name__)
    for name, value in bound_args.arguments.items():
        if name != "self":
            # sequences are not logged
            if isinstance(value, dict):
                value = f"{len(value)} entries"
            logging.info("Parameter: %s = %s", name, value)


def get_enzyme_design_info(enzyme_design):

    num_designed = len(enzyme_design.designed_records)
    num_without_design = len(enzyme_design.transcripts_without_design)
    num_without_site = len(enzyme_design.transcripts_without_site)
    return num_designed, num_without_design, num_without_site


def pipeline_step_basic(step_name: str):

    def decorator(function):
        def wrapper(*args, **kwargs):
            logging.info(f"Parameters {step_name}:")
            log_parameters(function, args, kwargs)

            enzyme_design = function(*args, **kwargs)

            num_designed, num_without_design, num_without_site = get_enzyme_design_info(enzyme_design)
            logging.info(
                f"Step - {step_name}: {num_designed} transcripts designed, {num_without_design} without design, "
                f"{num_without_site} without cut site."
            )

            return enzyme_design

        return wrapper

    return decorator
