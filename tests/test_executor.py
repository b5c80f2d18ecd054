import os
import tempfile
import unittest
from unittest.mock import patch

from deploybuilder import executor
from deploybuilder.builders import CompiledProjectBuilder, LooseSiteBuilder, FileCopyBuilder
from repo_fixtures import write_file


class TestBuildCommands(unittest.TestCase):

    def test_compiled_project_command(self):
        builder = CompiledProjectBuilder(repository_root="/repo",
                                         project_path="/repo/src/Web/Web.csproj",
                                         solution_path="/repo/App.sln")
        command = executor.compiled_project_command(builder, "/tmp/work", {"Configuration": "Release"})

        self.assertEqual(command[:2], ["msbuild", "/repo/src/Web/Web.csproj"])
        self.assertIn("/p:_PackageTempDir=/tmp/work", command)
        self.assertIn(f"/p:SolutionDir=/repo{os.sep}", command)
        self.assertEqual(command[-1], "/p:Configuration=Release")

    def test_compiled_project_command_without_solution(self):
        builder = CompiledProjectBuilder(repository_root="/repo", project_path="/repo/Web.csproj")
        command = executor.compiled_project_command(builder, "/tmp/work", msbuild="dotnet-msbuild")

        self.assertEqual(command[0], "dotnet-msbuild")
        self.assertFalse(any(arg.startswith("/p:SolutionDir") for arg in command))

    def test_loose_site_command_builds_solution(self):
        builder = LooseSiteBuilder(repository_root="/repo", solution_path="/repo/App.sln", project_path="/repo/site")
        command = executor.loose_site_command(builder, {"A": "1"})

        self.assertEqual(command, ["msbuild", "/repo/App.sln", "/nologo", "/verbosity:m", "/p:A=1"])


class TestExecute(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.base = self._tmp.name
        self.repo = os.path.join(self.base, "repo")
        self.deploy = os.path.join(self.base, "deploy")
        self.work = os.path.join(self.base, "work")

    def tearDown(self):
        self._tmp.cleanup()

    @patch('deploybuilder.executor.logger')
    def test_file_copy(self, mock_logger):
        write_file(self.repo, "index.html", "<html></html>")
        write_file(self.repo, "css/site.css", "body {}")
        write_file(self.repo, ".git/HEAD", "ref: refs/heads/master")
        write_file(self.repo, ".deployment.toml", "")

        self.assertTrue(executor.execute(FileCopyBuilder(source_path=self.repo), self.deploy, self.work))

        self.assertTrue(os.path.isfile(os.path.join(self.deploy, "index.html")))
        self.assertTrue(os.path.isfile(os.path.join(self.deploy, "css", "site.css")))
        self.assertFalse(os.path.exists(os.path.join(self.deploy, ".git")))
        self.assertFalse(os.path.exists(os.path.join(self.deploy, ".deployment.toml")))

    @patch('deploybuilder.executor.logger')
    def test_file_copy_of_single_file(self, mock_logger):
        source = write_file(self.repo, "index.html", "hi")

        self.assertTrue(executor.execute(FileCopyBuilder(source_path=source), self.deploy, self.work))

        self.assertTrue(os.path.isfile(os.path.join(self.deploy, "index.html")))

    @patch('deploybuilder.executor.logger')
    @patch('deploybuilder.executor.run_shell_command')
    def test_compiled_project_builds_then_copies_output(self, mock_run, mock_logger):
        write_file(self.work, "bin/Web.dll", "binary")
        mock_run.return_value = ("Build succeeded.", 0)
        builder = CompiledProjectBuilder(repository_root=self.repo, project_path=os.path.join(self.repo, "Web.csproj"))

        self.assertTrue(executor.execute(builder, self.deploy, self.work, {"Configuration": "Release"}))

        command = mock_run.call_args[0][0]
        self.assertIn("/p:Configuration=Release", command)
        self.assertEqual(mock_run.call_args[1]["cwd"], self.repo)
        self.assertTrue(os.path.isfile(os.path.join(self.deploy, "bin", "Web.dll")))

    @patch('deploybuilder.executor.logger')
    @patch('deploybuilder.executor.run_shell_command')
    def test_failed_build_stops_deployment(self, mock_run, mock_logger):
        mock_run.return_value = ("error CS1002: ; expected", 1)
        builder = LooseSiteBuilder(repository_root=self.repo,
                                   solution_path=os.path.join(self.repo, "App.sln"),
                                   project_path=os.path.join(self.repo, "site"))

        self.assertFalse(executor.execute(builder, self.deploy, self.work))

        self.assertFalse(os.path.exists(self.deploy))
        mock_logger.error.assert_called_once()

    @patch('deploybuilder.executor.logger')
    @patch('deploybuilder.executor.run_shell_command')
    def test_dry_run_executes_nothing(self, mock_run, mock_logger):
        builder = CompiledProjectBuilder(repository_root=self.repo, project_path=os.path.join(self.repo, "Web.csproj"))

        self.assertTrue(executor.execute(builder, self.deploy, self.work, dry_run=True))

        mock_run.assert_not_called()
        self.assertFalse(os.path.exists(self.deploy))


if __name__ == "__main__":
    unittest.main()
