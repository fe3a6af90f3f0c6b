from divlisp.evaluation.evaluator import evaluate

__all__ = ["evaluate"]
