# Copyright 2025 Loopper-AI
# CloudFormation stack notification relay
