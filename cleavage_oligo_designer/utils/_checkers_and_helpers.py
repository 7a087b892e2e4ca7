############################################
# imports
############################################

import warnings

import yaml

############################################
# Collection of utility functions
############################################


class CustomYamlDumper(yaml.SafeDumper):
    def increase_indent(self, flow=False):
        return super(CustomYamlDumper, self).increase_indent(flow, False)

    def represent_list(self, data):
        return self.represent_sequence("tag:yaml.org,2002:seq", data, flow_style=True)

    def represent_dict(self, data):
        return self.represent_mapping("tag:yaml.org,2002:map", data, flow_style=False)


def check_if_dna_sequence(seq: str, valid_characters: list = ["A", "C", "T", "G"]) -> bool:
    if any(len(char) > 1 for char in valid_characters):
        raise ValueError("Valid characters must be single characters.")

    valid_characters_upper = [char.upper() for char in valid_characters]
    if not all(char.upper() in ["A", "C", "T", "G", "U"] for char in valid_characters_upper):
        warnings.warn("Valid characters should be A, C, T, G, or U.")

    if seq == "":
        return False
    return all(char.upper() in valid_characters_upper for char in seq)


def check_if_list(obj: any) -> list:
    if obj:
        obj = [obj] if not isinstance(obj, list) else obj
    return obj

