from cssvars.evaluator.evaluator import evaluate_literal, js_number_string

__all__ = ["evaluate_literal", "js_number_string"]
