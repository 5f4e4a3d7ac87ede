from stacknt.evaluation.evaluator import evaluate

__all__ = ["evaluate"]
