"""Configuração do SDK: settings de acesso e logging estruturado."""
