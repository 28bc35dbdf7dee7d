"""Alternative front ends hosting the editor session."""
